"""Keyword heuristic for the search intent behind a document."""

import enum
import re
from typing import NamedTuple


class Intent(str, enum.Enum):
    INFORMATIONAL = "informational"
    NAVIGATIONAL = "navigational"
    TRANSACTIONAL = "transactional"
    COMMERCIAL = "commercial"
    UNKNOWN = "unknown"


class IntentDetection(NamedTuple):
    intent: Intent
    confidence: float
    signals: list[str]


# (keywords, weight per occurrence, bonus when the keyword is in the title)
INTENT_VOCABULARY = {
    Intent.INFORMATIONAL: (
        (
            "how", "what", "why", "guide", "tutorial", "learn", "understand",
            "when", "where", "who", "meaning", "definition", "explanation",
            "example", "examples", "difference", "differences", "tips",
            "come", "cosa", "perché", "guida", "imparare", "capire",
            "cos'è", "quando", "dove", "chi è", "significato", "definizione",
            "spiegazione", "esempio", "esempi", "differenza", "differenze",
        ),
        1.0,
        2.0,
    ),
    Intent.TRANSACTIONAL: (
        (
            "buy", "purchase", "order", "price", "prices", "discount", "discounts",
            "deal", "deals", "sale", "shop", "cart", "checkout", "payment",
            "shipping", "delivery", "available", "availability", "download",
            "acquista", "compra", "comprare", "acquistare", "ordina", "ordinare",
            "prezzo", "prezzi", "sconto", "sconti", "offerta", "offerte",
            "vendita", "negozio", "carrello", "pagamento", "spedizione",
            "consegna", "disponibile", "disponibilità",
        ),
        1.5,
        3.0,
    ),
    Intent.COMMERCIAL: (
        (
            "best", "review", "reviews", "comparison", "compare", "vs", "versus",
            "alternative", "alternatives", "top", "ranking", "ratings",
            "opinions", "pros", "cons", "advantages", "disadvantages",
            "migliore", "migliori", "recensione", "recensioni", "confronto",
            "comparazione", "alternativa", "classifica", "valutazione",
            "opinioni", "pareri", "vantaggi", "svantaggi", "contro",
        ),
        1.3,
        2.5,
    ),
    Intent.NAVIGATIONAL: (
        (
            "login", "sign in", "sign up", "register", "account", "contact",
            "about us", "contact us", "official site", "homepage",
            "accedi", "registrati", "area clienti", "contatti", "chi siamo",
            "contattaci", "sito ufficiale",
        ),
        1.0,
        2.0,
    ),
}

RECOMMENDATIONS = {
    Intent.INFORMATIONAL: [
        "Use FAQ sections to answer common questions.",
        "Include practical examples and step-by-step instructions.",
        "Target featured snippets with lists and definitions.",
        "Add FAQ or HowTo schema markup.",
    ],
    Intent.TRANSACTIONAL: [
        "Include clear, visible calls to action.",
        "Show prices, availability and shipping options.",
        "Add Product schema markup.",
        "Simplify the purchase or conversion flow.",
    ],
    Intent.COMMERCIAL: [
        "Provide detailed, objective comparisons.",
        "Include pros/cons and comparison tables.",
        "Add authentic reviews and testimonials.",
        "Use Review schema to increase visibility.",
    ],
    Intent.NAVIGATIONAL: [
        "Optimise the brand name and contact details.",
        "Implement Organization schema markup.",
        "Make sure the logo and menu are well structured.",
    ],
    Intent.UNKNOWN: [
        "Define the goal of the content more clearly.",
        "Include specific keywords that signal the user's intent.",
    ],
}

MIN_CONFIDENCE = 0.3
MAX_SIGNALS = 5

_PRICE_RE = re.compile(r"(€|£|\$|\beur|\busd|\bgbp)\s*\d+")


def _count(text: str, keyword: str) -> int:
    """Whole-word occurrences of `keyword` in `text`."""
    return len(re.findall(rf"(?<!\w){re.escape(keyword)}(?!\w)", text))


class SearchIntentDetector:
    """Classifies a document as informational, transactional, commercial or navigational."""

    def detect(self, title: str, content: str) -> IntentDetection:
        title = title.lower()
        text = f"{title} {content.lower()}"

        scores = {intent: 0.0 for intent in INTENT_VOCABULARY}
        signals = []

        for intent, (keywords, per_hit, title_bonus) in INTENT_VOCABULARY.items():
            for keyword in keywords:
                count = _count(text, keyword)
                if not count:
                    continue
                scores[intent] += count * per_hit
                if _count(title, keyword):
                    scores[intent] += title_bonus
                signals.append(f'{intent.value.capitalize()} keyword "{keyword}" found {count}x')

        if text.count("?") > 3:
            scores[Intent.INFORMATIONAL] += 2
            signals.append("Multiple question marks indicate informational intent")

        if _PRICE_RE.search(text):
            scores[Intent.TRANSACTIONAL] += 3
            signals.append("Price information found, indicating transactional intent")

        # Ties resolve in vocabulary order
        primary = max(scores, key=lambda intent: scores[intent])
        top = scores[primary]
        total = sum(scores.values())
        confidence = min(1.0, top / total) if total > 0 else 0.0

        if top == 0 or confidence < MIN_CONFIDENCE:
            return IntentDetection(Intent.UNKNOWN, 0.0, ["No clear search intent detected"])

        return IntentDetection(primary, round(confidence, 2), signals[:MAX_SIGNALS])

    def recommendations(self, intent: Intent) -> list[str]:
        return list(RECOMMENDATIONS.get(intent, RECOMMENDATIONS[Intent.UNKNOWN]))
