"""
Portfolio record ➜ static site (index.html + styles.css + README.md).
"""
from __future__ import annotations
import io, re, zipfile
from datetime import date

from jinja2 import Environment, PackageLoader, select_autoescape

from .schema_portfolio import PortfolioRecord

env = Environment(loader=PackageLoader("resume2portfolio", "templates"),
                  autoescape=select_autoescape(["html"]),
                  trim_blocks=True, lstrip_blocks=True)

_SLUG_RE = re.compile(r"\s+")


def portfolio_to_css(record: PortfolioRecord) -> str:
    return env.get_template("styles.css").render(c=record.customizations)


def portfolio_to_html(record: PortfolioRecord, inline: bool = False) -> str:
    """Render portfolio → HTML.  If inline=True, embed CSS in a <style> tag."""
    css_inline = portfolio_to_css(record) if inline else ""
    return env.get_template("base.html").render(
        r=record, inline_css=css_inline, year=date.today().year
    )


def export_filename(record: PortfolioRecord) -> str:
    return f"portfolio-{_SLUG_RE.sub('-', record.name.strip()).lower()}.zip"


def export_site(record: PortfolioRecord) -> bytes:
    """Zip the rendered site in memory; the caller decides where it goes."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
        zf.writestr("index.html", portfolio_to_html(record))
        zf.writestr("styles.css", portfolio_to_css(record))
        zf.writestr("README.md", env.get_template("README.md").render(r=record))
    return buf.getvalue()
