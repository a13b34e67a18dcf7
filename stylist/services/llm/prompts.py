from __future__ import annotations

from typing import Dict, List

from stylist.services.directives import describe_field_schema
from stylist.services.llm.types import FALLBACK_CATEGORY, INSPIRATION_CATEGORIES

EXTRACT_SYS = (
    "You are a senior fashion-tech parser. Classify the user's style request and "
    "return a single JSON object.\n"
    f"Required key: \"category\", one of: {', '.join(INSPIRATION_CATEGORIES)}.\n"
    "Optional keys depend on the category; include only keys you can fill from the request:\n"
    f"{describe_field_schema()}\n"
    "All values are strings. Leave out keys you cannot fill; never use null.\n"
    f"If nothing matches, return {{\"category\": \"{FALLBACK_CATEGORY}\"}}.\n"
    "Return ONLY raw JSON: no markdown, no code fences, no additional text."
)

SUGGEST_SYS = (
    "You are an avant-garde stylist trained on global fashion week trends, streetwear blogs, "
    "luxury look-books and climate data. Respond with ONLY a raw JSON array: no markdown, "
    "no code fences, no commentary."
)

OUTPUT_SCHEMA = (
    "Return a JSON array of exactly {count} objects. Each outfit must include:\n"
    "- \"name\": a catchy outfit name\n"
    "- \"description\": labelled items (Top, Bottom, Outerwear if required, Shoes, Accessories) "
    "with colour, fabric & fit details\n"
    "- \"searchQuery\": an e-commerce friendly search keyword\n"
    "- \"imagePrompt\": a concise descriptive image generation prompt\n"
    "No markdown."
)

def build_extraction_prompt(message: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": EXTRACT_SYS},
        {"role": "user", "content": message},
    ]

def build_suggestion_prompt(directive: str, count: int) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SUGGEST_SYS},
        {"role": "user", "content": f"{directive}\n\n{OUTPUT_SCHEMA.format(count=count)}"},
    ]
