"""Prompt templates sent to the classification model."""

from __future__ import annotations


def render_review_classification_prompt(context: dict) -> str:
    return (
        "You are a strict JSON-only classifier.\n"
        "Analyze this review and respond ONLY with a valid JSON object in this format:\n"
        "{\n"
        ' "safety_score": number, // between 0 (safe) and 1 (unsafe)\n'
        ' "sentiment_score": number, // between -1 (negative) and 1 (positive)\n'
        ' "action": "allow" | "flag" | "block"\n'
        "}\n"
        f'Review: """{context.get("content", "")}"""\n'
    )


DEFAULT_PROMPT_REGISTRY = {
    "review.classification": render_review_classification_prompt,
}
