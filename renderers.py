"""
Turns analysis output into HTML fragments for the result panel.
"""
import markdown
from markupsafe import escape

from config import SANITIZE_HTML
from constants import RISK_TIER_STYLES
from schemas import RiskAssessment

MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists"]

RISK_CARD_TEMPLATE = """
<div class="risk-card bg-black/20 p-6 rounded-lg border border-[#30363D]" data-tier="{tier}">
    <h2 class="text-2xl font-bold text-center text-gray-200 mb-4">AI Risk Score Report</h2>
    <div class="text-center mb-6">
        <div class="text-8xl mb-2">{emoji}</div>
        <div class="text-6xl font-bold {color_class}">{score} / 100</div>
        <div class="text-2xl font-semibold text-gray-300 mt-2">{rating}</div>
    </div>
    <div>
        <h3 class="text-xl font-semibold text-blue-300 mb-3 border-b border-[#30363D] pb-2">Key Contributing Factors:</h3>
        <ul class="space-y-3 text-gray-300">{items}</ul>
    </div>
</div>
"""

RISK_CARD_ITEM = '<li class="flex items-start gap-3"><span class="mt-1">🔹</span><span>{text}</span></li>'


def render_markdown(text, sanitize=SANITIZE_HTML):
    """
    Convert markdown into an HTML fragment.

    With ``sanitize`` set, raw HTML in the source is rendered as escaped
    text instead of being passed through.
    """
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS)
    if sanitize:
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")
    return md.convert(text)


def render_risk_card(assessment: RiskAssessment) -> str:
    """Build the risk card markup; every field value is HTML-escaped."""
    tier = assessment.tier
    style = RISK_TIER_STYLES[tier.value]
    items = "".join(RISK_CARD_ITEM.format(text=escape(item)) for item in assessment.justification)
    return RISK_CARD_TEMPLATE.format(
        tier=tier.value,
        emoji=style["emoji"],
        color_class=style["color_class"],
        score=escape(assessment.score),
        rating=escape(assessment.rating),
        items=items,
    )
