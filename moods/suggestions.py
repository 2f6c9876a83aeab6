"""Static per-mood suggestion lists and badge styling. No I/O."""
from __future__ import annotations

# Keys are the stored mood labels (see Mood.Label).
MAX_SUGGESTIONS = 3

SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "stressed": ("Take 5 deep breaths", "Go for a short walk", "Listen to calming music"),
    "tired": ("Take a 10-minute break", "Drink some water", "Do light stretching"),
    "focused": (
        "Tackle your most important task",
        "Set a timer for focused work",
        "Eliminate distractions",
    ),
    "happy": ("Share your positive energy", "Express gratitude", "Help someone else"),
    "sad": ("Talk to a friend", "Practice self-care", "Do something you enjoy"),
    "anxious": (
        "Practice mindfulness",
        "Focus on what you can control",
        "Use grounding techniques",
    ),
    "calm": ("Maintain this peaceful state", "Practice meditation", "Enjoy the moment"),
    "excited": ("Channel energy productively", "Share your excitement", "Plan something fun"),
    "neutral": ("Check in with yourself", "Set small goals", "Practice gratitude"),
}

DEFAULT_SUGGESTIONS: tuple[str, ...] = (
    "Take a moment for yourself",
    "Stay mindful",
    "Practice self-care",
)

# label -> (icon, css class)
MOOD_STYLES: dict[str, tuple[str, str]] = {
    "happy": ("smile", "mood-green"),
    "sad": ("frown", "mood-blue"),
    "neutral": ("meh", "mood-gray"),
    "stressed": ("brain", "mood-red"),
    "focused": ("zap", "mood-purple"),
    "calm": ("heart", "mood-green"),
    "anxious": ("brain", "mood-orange"),
    "excited": ("sun", "mood-yellow"),
    "tired": ("coffee", "mood-gray"),
}
DEFAULT_STYLE: tuple[str, str] = ("heart", "")

ICON_GLYPHS: dict[str, str] = {
    "smile": "🙂",
    "frown": "🙁",
    "meh": "😐",
    "brain": "🧠",
    "zap": "⚡",
    "heart": "❤️",
    "sun": "☀️",
    "coffee": "☕",
}


def get_suggestions(mood: str | None) -> list[str]:
    """Return the ordered suggestions for a mood label.

    Unknown or empty labels get DEFAULT_SUGGESTIONS; the function never raises.
    """
    return list(SUGGESTIONS.get(mood or "", DEFAULT_SUGGESTIONS))


def top_suggestions(mood: str | None, limit: int = MAX_SUGGESTIONS) -> list[str]:
    """At most `limit` suggestions for display."""
    return get_suggestions(mood)[:limit]


def mood_style(mood: str | None) -> tuple[str, str]:
    """(icon, css class) for a label, with a neutral fallback."""
    return MOOD_STYLES.get(mood or "", DEFAULT_STYLE)


def mood_glyph(mood: str | None) -> str:
    return ICON_GLYPHS[mood_style(mood)[0]]
