"""
explanation/generator.py
Tracking summary generator using a LangChain chain.

LangChain pipeline:
  1. PromptTemplate — build a prompt from the normalized tracking snapshot
  2. ChatGroq — write a short status summary for a dashboard user
  3. StrOutputParser — extract clean string from AIMessage
"""
import json
from typing import Any

from config.settings import settings
from monitoring import get_logger

log = get_logger(__name__)

_TEMPLATE = """You are a freight-forwarding operations assistant writing for a customer dashboard.

Shipment reference: {reference}
Current status: {status}
Vessel: {vessel}
Estimated arrival: {eta}

Tracking events (oldest first):
{events_json}

Write a short, factual summary (at most 4 sentences) that:
1. States where the shipment is now and its current status.
2. Names the vessel carrying it, if known.
3. Gives the estimated arrival, if known.

Use only the data above. Do not invent ports, dates or vessels.
"""


class TrackingSummaryGenerator:
    """
    Plain-English summary of a TrackingData snapshot.

    Chain:
      PromptTemplate | ChatGroq | StrOutputParser
    """

    def __init__(self, chain: Any = None) -> None:
        self._llm   = None    # lazy ChatGroq
        self._chain = chain   # lazy LCEL chain

    def _get_llm(self):
        from langchain_groq import ChatGroq
        return ChatGroq(
            api_key=settings.groq_api_key,
            model=settings.groq_model,
            temperature=0.2,
            max_tokens=512,
        )

    def _get_chain(self):
        from langchain_core.output_parsers import StrOutputParser
        from langchain_core.prompts import PromptTemplate

        if self._llm is None:
            self._llm = self._get_llm()

        prompt = PromptTemplate(
            template=_TEMPLATE,
            input_variables=["reference", "status", "vessel", "eta", "events_json"],
        )
        return prompt | self._llm | StrOutputParser()

    @property
    def chain(self):
        if self._chain is None:
            self._chain = self._get_chain()
        return self._chain

    def generate(self, data: Any) -> str:
        events = [
            {
                "timestamp": loc.timestamp,
                "place":     loc.location.name,
                "country":   loc.location.country,
                "event":     loc.event,
            }
            for loc in data.locations
        ]
        vessel = "unknown"
        if data.vessel is not None:
            vessel = data.vessel.name
            if data.vessel.imo:
                vessel = f"{vessel} (IMO {data.vessel.imo})"

        summary = self.chain.invoke({
            "reference":   data.reference,
            "status":      data.status.value,
            "vessel":      vessel,
            "eta":         data.estimated_arrival or "unknown",
            "events_json": json.dumps(events, indent=2, ensure_ascii=False),
        })
        log.info("Tracking summary generated", reference=data.reference, chars=len(summary))
        return summary
