import logging

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import PromptTemplate

from config import DEFAULT_LANGUAGE
from constants import (
    OCR_INSTRUCTION, SUMMARY_PROMPT_TEMPLATE, JARGON_PROMPT_TEMPLATE,
    HIDDEN_TERMS_PROMPT_TEMPLATE, HIDDEN_FEES_PROMPT_TEMPLATE,
    QUESTION_PROMPT_TEMPLATE, RISK_SCORE_PROMPT_TEMPLATE,
    TRANSLATE_MARKDOWN_TEMPLATE, TRANSLATE_SEGMENTS_TEMPLATE,
    TRANSLATION_SEPARATOR
)
from exceptions import (
    AIServiceError, AnalysisFailed, EmptyDocument, EmptyExtraction,
    ExtractionFailed, InvalidInput, MalformedAIResponse, MissingQuery
)
from renderers import render_markdown, render_risk_card
from schemas import AnalysisKind, AnalysisResult, RiskAssessment

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# One free-text template per analysis kind; risk score is structured and built separately
PROMPT_TEMPLATES = {
    AnalysisKind.SUMMARIZE: PromptTemplate.from_template(SUMMARY_PROMPT_TEMPLATE),
    AnalysisKind.JARGON: PromptTemplate.from_template(JARGON_PROMPT_TEMPLATE),
    AnalysisKind.HIDDEN_TERMS: PromptTemplate.from_template(HIDDEN_TERMS_PROMPT_TEMPLATE),
    AnalysisKind.HIDDEN_FEES: PromptTemplate.from_template(HIDDEN_FEES_PROMPT_TEMPLATE),
    AnalysisKind.QUESTION: PromptTemplate.from_template(QUESTION_PROMPT_TEMPLATE),
}

risk_parser = PydanticOutputParser(pydantic_object=RiskAssessment)

RISK_SCORE_PROMPT = PromptTemplate(
    template=RISK_SCORE_PROMPT_TEMPLATE,
    input_variables=["document_text"],
    partial_variables={"format_instructions": risk_parser.get_format_instructions()},
)

TRANSLATE_MARKDOWN_PROMPT = PromptTemplate.from_template(TRANSLATE_MARKDOWN_TEMPLATE)
TRANSLATE_SEGMENTS_PROMPT = PromptTemplate.from_template(TRANSLATE_SEGMENTS_TEMPLATE)


# --- HELPER FUNCTIONS FOR ANALYSIS ---

def needs_translation(target_language):
    """Translation runs for any language other than English."""
    return bool(target_language) and target_language.strip().lower() != "english"


def build_prompt(kind, document_text, query=None):
    """Select the instruction text for a free-text analysis kind."""
    kind = _coerce_kind(kind)
    if kind is AnalysisKind.RISK_SCORE:
        raise ValueError("Risk score analysis uses a structured request, not a text template.")
    if kind is AnalysisKind.QUESTION:
        if not query or not query.strip():
            raise MissingQuery("A specific question is required for this analysis type.")
        return PROMPT_TEMPLATES[kind].format(document_text=document_text, query=query.strip())
    return PROMPT_TEMPLATES[kind].format(document_text=document_text)


def get_risk_assessment(client, document_text):
    """Request a structured risk score and parse it into a RiskAssessment."""
    prompt = RISK_SCORE_PROMPT.format(document_text=document_text)
    logger.info("Requesting risk score")
    raw_response = client.generate_json(prompt)
    try:
        assessment = risk_parser.parse(raw_response)
    except OutputParserException as e:
        logger.error(f"Failed to parse risk score JSON: {str(e)}")
        raise MalformedAIResponse(f"The AI returned a risk score that could not be read: {str(e)}") from e
    logger.info(f"Risk score received: {assessment.score} ({assessment.rating})")
    return assessment


def translate_risk_assessment(client, assessment, target_language):
    """
    Translate the rating and justification of a risk assessment.

    All fields travel in one call, joined with TRANSLATION_SEPARATOR. The
    translation is used only when it splits back into exactly one segment
    per field; otherwise the original assessment is returned unchanged.
    """
    segments = [assessment.rating] + list(assessment.justification)
    prompt = TRANSLATE_SEGMENTS_PROMPT.format(
        target_language=target_language,
        text=TRANSLATION_SEPARATOR.join(segments),
    )
    logger.info(f"Translating risk assessment into {target_language}")
    translated = client.translate(prompt).strip()
    if not translated:
        logger.warning("Empty risk assessment translation, keeping original")
        return assessment

    parts = [part.strip() for part in translated.split(TRANSLATION_SEPARATOR)]
    if len(parts) != len(segments):
        logger.warning(
            f"Risk assessment translation returned {len(parts)} segments, "
            f"expected {len(segments)}; keeping original"
        )
        return assessment
    return assessment.model_copy(update={"rating": parts[0], "justification": parts[1:]})


def translate_markdown(client, text, target_language):
    """Translate markdown text, falling back to the original on an empty reply."""
    prompt = TRANSLATE_MARKDOWN_PROMPT.format(target_language=target_language, text=text)
    logger.info(f"Translating analysis into {target_language}")
    translated = client.translate(prompt)
    if not translated or not translated.strip():
        logger.warning("Empty translation, keeping original text")
        return text
    return translated


def _coerce_kind(kind):
    if isinstance(kind, AnalysisKind):
        return kind
    try:
        return AnalysisKind(kind)
    except ValueError:
        raise InvalidInput(f"Invalid analysis type: {kind!r}")


# --- MAIN PUBLIC FUNCTIONS ---

def extract_text_from_image(client, image_bytes, mime_type):
    """Run OCR on a document image and return the extracted text."""
    if not image_bytes or not mime_type:
        raise InvalidInput("Image data and MIME type are required.")

    try:
        logger.info(f"Extracting text from {mime_type} image ({len(image_bytes)} bytes)")
        extracted_text = client.extract_image_text(image_bytes, mime_type, OCR_INSTRUCTION)
    except AIServiceError as e:
        raise ExtractionFailed(f"Failed to extract text from image: {e.message}") from e

    if not extracted_text or not extracted_text.strip():
        raise EmptyExtraction(
            "Could not extract any text from the image. The document might be blurry or empty."
        )
    logger.info(f"Extracted {len(extracted_text)} characters")
    return extracted_text


def analyze_document(client, kind, document_text, query=None, target_language=DEFAULT_LANGUAGE):
    """
    Run one analysis over extracted document text.

    Issues the primary AI call, an optional translation call, and returns
    an AnalysisResult whose ``html`` is ready for display.
    """
    kind = _coerce_kind(kind)
    if not document_text or not document_text.strip():
        raise EmptyDocument("The document text cannot be empty. It may not have been extracted correctly.")

    try:
        if kind is AnalysisKind.RISK_SCORE:
            assessment = get_risk_assessment(client, document_text)
            if needs_translation(target_language):
                assessment = translate_risk_assessment(client, assessment, target_language)
            return AnalysisResult(
                kind=kind,
                html=render_risk_card(assessment),
                target_language=target_language,
                risk=assessment,
            )

        prompt = build_prompt(kind, document_text, query)
        logger.info(f"Running {kind.value} analysis")
        analysis_text = client.generate_text(prompt)
        if not analysis_text or not analysis_text.strip():
            raise AnalysisFailed("Received an empty response from the AI.")

        # Questions are answered in the default language
        if kind is not AnalysisKind.QUESTION and needs_translation(target_language):
            analysis_text = translate_markdown(client, analysis_text, target_language)

        logger.info(f"Completed {kind.value} analysis")
        return AnalysisResult(
            kind=kind,
            html=render_markdown(analysis_text),
            target_language=target_language,
        )

    except AIServiceError as e:
        raise AnalysisFailed(f"Failed to get analysis from AI: {e.message}") from e
