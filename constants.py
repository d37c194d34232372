"""Constants and configuration values."""

# Target languages offered to the user
SUPPORTED_LANGUAGES = [
    "English",
    "Spanish",
    "French",
    "German",
    "Japanese",
    "Hindi",
    "Tamil",
    "Telugu",
    "Kannada",
    "Malayalam",
]

# Allowed risk ratings, lowest to highest
RISK_RATINGS = ("Low Risk", "Moderate Risk", "High Risk", "Very High Risk")

# Visual treatment per risk tier
RISK_TIER_STYLES = {
    "calm": {"color_class": "text-green-400", "emoji": "😊"},
    "caution": {"color_class": "text-yellow-400", "emoji": "😐"},
    "alarm": {"color_class": "text-red-400", "emoji": "😟"},
}

# Joins rating and justification entries for a single translation call
TRANSLATION_SEPARATOR = "\n---\n"

# Prompt templates
OCR_INSTRUCTION = (
    "Perform OCR on this image of a legal document. Extract all text content accurately. "
    "Maintain the original structure, including paragraphs, lists, and headings, as best as possible. "
    "Do not summarize, interpret, or add any information that is not present in the image. "
    "Only return the extracted text."
)

BASE_INTRO = (
    "You are an expert legal assistant named LegalEase AI. Your goal is to demystify complex legal "
    "documents for the average person. Analyze the following legal document and respond in clear, "
    "simple, and easy-to-understand language. Use markdown for formatting (headings, lists, bold text) "
    "to improve readability."
)

SUMMARY_PROMPT_TEMPLATE = BASE_INTRO + """

**Task:** Provide a structured and precise summary of the document. Use the following markdown format with the exact headings. For each section, provide clear, concise bullet points. If no information is found for a section, state "Not specified in the document."

### Document Overview
- **Type:** [e.g., Lease Agreement, Terms of Service]
- **Purpose:** [A single sentence explaining the main goal of the document.]

### Your Key Obligations & Responsibilities
- [List key duties and actions required from you.]

### Other Party's Key Obligations & Responsibilities
- [List key duties and actions required from the other party.]

### Financial Breakdown
- [List all costs, fees, payment schedules, and penalties. Be specific.]

### Important Clauses & Potential Risks
- [Highlight any critical clauses, deadlines, or potential risks you should be aware of.]

**Document:**
\"\"\"
{document_text}
\"\"\"
"""

JARGON_PROMPT_TEMPLATE = BASE_INTRO + """

**Task:** Identify and explain complex legal jargon or confusing clauses in the document. For each term/clause:
1. Quote or name the term/clause.
2. Provide a simple, plain-language explanation of what it means.
3. Briefly explain its practical implication for the user in the context of this document.

**Document:**
\"\"\"
{document_text}
\"\"\"
"""

HIDDEN_TERMS_PROMPT_TEMPLATE = """You are an expert legal assistant specializing in consumer protection. Your task is to meticulously scan the following legal document for any hidden or potentially unfavorable terms. Focus specifically on identifying:
- Vague or ambiguous language that could be exploited.
- Clauses related to automatic renewals or recurring charges.
- Unexpected fees, penalties, or charges (e.g., late fees, early termination fees).
- Clauses that waive the user's rights (e.g., waiver of jury trial, class action waiver).
- Unilateral rights for the other party to change terms.
- Strict notice periods or complex cancellation procedures.

For each identified term, quote the relevant text and explain in simple language why it's a potential risk for the user. Use markdown for formatting. If no such terms are found, state that the document appears to be straightforward in this regard.

**Document:**
\"\"\"
{document_text}
\"\"\"
"""

HIDDEN_FEES_PROMPT_TEMPLATE = """You are a forensic financial analyst specializing in contracts. Your sole task is to meticulously scan the following document to identify and highlight all potential hidden costs, fees, penalties, and financial traps. Focus exclusively on:
- Late payment fees and their calculation.
- Early termination penalties.
- Automatic renewal clauses and the associated costs.
- Undisclosed or vaguely mentioned charges (e.g., 'administrative fees', 'processing fees').
- Interest rates on overdue payments.
- Clauses that allow for unilateral price increases.

For each item you find, quote the exact text from the document, provide a clear explanation of the potential financial impact, and present it under a "Potential Hidden Fee/Penalty" heading. Use markdown for clear formatting. If no such items are found, state clearly: "No specific hidden fees or financial penalties were identified in the document." Do not analyze any other legal aspects.

**Document:**
\"\"\"
{document_text}
\"\"\"
"""

QUESTION_PROMPT_TEMPLATE = BASE_INTRO + """

**Task:** Based *only* on the provided document, answer the user's specific question. If the document does not contain the answer, state that clearly.

**User's Question:** "{query}"

**Document:**
\"\"\"
{document_text}
\"\"\"
"""

RISK_SCORE_PROMPT_TEMPLATE = """Analyze the following legal document and provide a risk score. Consider factors like hidden fees, unfavorable clauses, ambiguity, and waivers of rights. Return a JSON object with the exact schema provided. The justification should be a list of the top 3-4 factors that influenced the score. The rating should be one of: "Low Risk", "Moderate Risk", "High Risk", or "Very High Risk".

{format_instructions}

Document: \"\"\"{document_text}\"\"\"
"""

TRANSLATE_MARKDOWN_TEMPLATE = """Translate the following text into {target_language}. Maintain the original markdown formatting and structure:

\"\"\"
{text}
\"\"\"
"""

TRANSLATE_SEGMENTS_TEMPLATE = """Translate the following text segments into {target_language}. The segments are separated by '---'. Maintain this separation in your response.

\"\"\"
{text}
\"\"\"
"""
