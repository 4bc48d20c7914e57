import io
import zipfile
from importlib import resources

from jinja2 import PackageLoader

from resume2portfolio.cleaner import normalise_portfolio
from resume2portfolio.generator_rule import env, export_filename, export_site, portfolio_to_css, portfolio_to_html
from resume2portfolio.parser_rule import detect_sections
from resume2portfolio.schema_portfolio import DetectedSections


def _record(text):
    return normalise_portfolio(detect_sections(text))


def test_html_contains_sections(sample_text):
    html = portfolio_to_html(_record(sample_text))
    assert html.startswith("<!DOCTYPE html>")
    assert "<h1>Jane Doe</h1>" in html
    assert 'href="https://github.com/janedoe"' in html
    assert "<h3>Languages</h3>" in html
    assert "Resume Site Builder" in html
    assert "State University | 2017" in html
    assert '<link rel="stylesheet" href="styles.css">' in html


def test_empty_record_renders_without_sections():
    html = portfolio_to_html(normalise_portfolio(DetectedSections()))
    assert "Portfolio Owner" in html
    assert 'class="skills"' not in html
    assert 'class="projects"' not in html


def test_html_is_escaped():
    record = normalise_portfolio(DetectedSections(name="<script>alert(1)</script>"))
    html = portfolio_to_html(record)
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_inline_css_uses_record_colors(sample_text):
    record = _record(sample_text)
    record.customizations.colors.primary = "#123456"
    html = portfolio_to_html(record, inline=True)
    assert "<style>" in html
    assert "--primary: #123456;" in html
    assert "styles.css" not in html


def test_css_uses_fonts(sample_text):
    css = portfolio_to_css(_record(sample_text))
    assert "font-family: 'Inter'" in css


def test_export_site_zip(sample_text):
    record = _record(sample_text)
    with zipfile.ZipFile(io.BytesIO(export_site(record))) as zf:
        assert sorted(zf.namelist()) == ["README.md", "index.html", "styles.css"]
        assert "Jane Doe" in zf.read("index.html").decode()
        assert "--accent: #60A5FA;" in zf.read("styles.css").decode()
        assert zf.read("README.md").decode().startswith("# Jane Doe")


def test_export_filename(sample_text):
    assert export_filename(_record(sample_text)) == "portfolio-jane-doe.zip"


def test_templates_ship_with_the_package():
    package = resources.files("resume2portfolio") / "templates"
    for name in ("base.html", "styles.css", "README.md"):
        assert (package / name).is_file()
    assert isinstance(env.loader, PackageLoader)
    assert set(env.list_templates()) >= {"base.html", "styles.css", "README.md"}
