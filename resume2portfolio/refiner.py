"""
Optional post-processing of a parsed portfolio.

The pipeline only calls a refiner when AI refinement is requested and a
provider is configured. IdentityRefiner is the default, so that request
is a no-op until a real refiner is plugged in.

• LLMRefiner asks the configured model to tidy the record and coerces
  the JSON reply back through cleaner.coerce_portfolio().
"""

from __future__ import annotations
import json, logging, re, textwrap
from abc import ABC, abstractmethod

from . import config
from .cleaner import coerce_portfolio
from .llm_client import LLMClient, get_llm_client
from .schema_portfolio import PORTFOLIO_SCHEMA, PortfolioRecord

logger = logging.getLogger(__name__)

_SYSTEM_PROMPT = textwrap.dedent(
    f"""
You are an expert résumé editor.
You receive a portfolio record parsed from a résumé by simple rules.
Fix obvious mis-splits (role vs company, merged lines, stray bullets)
and tidy wording. Never invent facts that are not in the record.
"skills" is a list of {{"category": ..., "items": [...]}} objects.
Output ONLY valid JSON conforming to this schema (no markdown fences):

{json.dumps(PORTFOLIO_SCHEMA, indent=2)}
"""
)

_JSON_FINDER = re.compile(r"\{.*\}", re.S)


def _extract_json(raw: str) -> dict:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        if m := _JSON_FINDER.search(raw):
            return json.loads(m.group())
        raise


class Refiner(ABC):
    """Capability interface: record in, record out."""

    @abstractmethod
    def refine(self, record: PortfolioRecord) -> PortfolioRecord:
        ...


class IdentityRefiner(Refiner):
    def refine(self, record: PortfolioRecord) -> PortfolioRecord:
        return record


class LLMRefiner(Refiner):
    def __init__(self, client: LLMClient | None = None, model: str | None = None):
        self._client = client
        self.model = model or config.get_model_for_provider()

    @property
    def client(self) -> LLMClient:
        if self._client is None:
            self._client = get_llm_client()
        return self._client

    def refine(self, record: PortfolioRecord) -> PortfolioRecord:
        messages = [
            {"role": "system", "content": _SYSTEM_PROMPT},
            {"role": "user", "content": json.dumps(record.to_dict(), ensure_ascii=False)},
        ]
        try:
            reply = self.client.chat(model=self.model, messages=messages)
            data = _extract_json(reply.strip().strip("`"))
        except Exception:
            # refinement is best effort; keep the rule-based record
            logger.warning("LLM refinement failed, keeping parsed record", exc_info=True)
            return record
        return coerce_portfolio(data, fallback=record)
