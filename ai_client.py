import base64
import logging

import openai
from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from config import Config
from exceptions import AIServiceError

logger = logging.getLogger(__name__)


class LegalAIClient:
    """Thin adapter over the chat models used for OCR, analysis and translation.

    Build one instance at process start and pass it to the analysis
    functions; tests substitute a stub with the same methods.
    """

    def __init__(self, extraction_llm, analysis_llm, json_llm, translation_llm):
        self._extraction_llm = extraction_llm
        self._analysis_llm = analysis_llm
        self._json_llm = json_llm
        self._translation_llm = translation_llm

    @classmethod
    def from_config(cls, config=Config):
        """Create a client with the models and credentials from ``config``."""
        common = {
            "openai_api_key": config.OPENAI_API_KEY,
            "timeout": config.REQUEST_TIMEOUT,
        }
        return cls(
            extraction_llm=ChatOpenAI(
                model=config.EXTRACTION_MODEL,
                temperature=config.EXTRACTION_TEMPERATURE,
                **common,
            ),
            analysis_llm=ChatOpenAI(
                model=config.ANALYSIS_MODEL,
                temperature=config.ANALYSIS_TEMPERATURE,
                **common,
            ),
            json_llm=ChatOpenAI(
                model=config.ANALYSIS_MODEL,
                temperature=config.ANALYSIS_TEMPERATURE,
                model_kwargs={"response_format": {"type": "json_object"}},
                **common,
            ),
            translation_llm=ChatOpenAI(
                model=config.TRANSLATION_MODEL,
                temperature=config.TRANSLATION_TEMPERATURE,
                **common,
            ),
        )

    def extract_image_text(self, image_bytes: bytes, mime_type: str, instruction: str) -> str:
        """Send an image together with an instruction and return the reply text."""
        encoded = base64.b64encode(image_bytes).decode("ascii")
        message = HumanMessage(content=[
            {"type": "text", "text": instruction},
            {"type": "image_url", "image_url": {"url": f"data:{mime_type};base64,{encoded}"}},
        ])
        return self._invoke(self._extraction_llm, [message])

    def generate_text(self, prompt: str) -> str:
        return self._invoke(self._analysis_llm, prompt)

    def generate_json(self, prompt: str) -> str:
        """Return the raw text of a reply constrained to a JSON object."""
        return self._invoke(self._json_llm, prompt)

    def translate(self, prompt: str) -> str:
        return self._invoke(self._translation_llm, prompt)

    @staticmethod
    def _invoke(llm, llm_input) -> str:
        try:
            response = llm.invoke(llm_input)
        except openai.APIError as e:
            logger.error(f"AI provider call failed: {str(e)}")
            raise AIServiceError(str(e)) from e
        return _message_text(response)


def _message_text(message) -> str:
    content = getattr(message, "content", None)
    if not content:
        return ""
    if isinstance(content, str):
        return content
    # Multi-part content: keep only the text blocks
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)
