"""Keyword-matched canned replies for the wellness companion."""

import random
import re

from shared_types import ResponseCategory

WELCOME_MESSAGE = (
    "Hello! I'm your Mental Wellness Companion. I'm here to listen and support you "
    "on your journey. How are you feeling today?"
)

# Checked in order; first match wins
_CATEGORY_PATTERNS = [
    (ResponseCategory.GREETING, re.compile(r"\b(hi|hello|hey|good morning|good afternoon)\b")),
    (ResponseCategory.SAD, re.compile(r"\b(sad|depressed|down|unhappy|miserable|awful)\b")),
    (ResponseCategory.ANXIOUS, re.compile(r"\b(anxious|anxiety|worried|nervous|scared|fear)\b")),
    (ResponseCategory.HAPPY, re.compile(r"\b(happy|great|wonderful|amazing|excited|good|better)\b")),
    (ResponseCategory.STRESSED, re.compile(r"\b(stressed|stress|overwhelmed|busy|pressure)\b")),
    (ResponseCategory.GRATEFUL, re.compile(r"\b(grateful|thankful|appreciate|blessed|fortunate)\b")),
]

RESPONSES: dict[ResponseCategory, tuple[str, ...]] = {
    ResponseCategory.GREETING: (
        "Hello! I'm here to support you. How are you feeling today?",
        "Hi there! It's great to see you. What's on your mind?",
        "Welcome! I'm here to listen. How can I help you today?",
    ),
    ResponseCategory.SAD: (
        "I'm sorry you're feeling down. Remember, it's okay to have difficult days. "
        "Would you like to talk about what's bothering you?",
        "Your feelings are valid. Sometimes just acknowledging how we feel can be helpful. "
        "I'm here to listen.",
        "I hear you. Tough moments are part of life, but they don't define you. "
        "You're stronger than you know.",
    ),
    ResponseCategory.ANXIOUS: (
        "Anxiety can be overwhelming. Try taking a few deep breaths with me. "
        "Inhale for 4... hold for 4... exhale for 4.",
        "It's normal to feel anxious sometimes. Remember, you've gotten through difficult "
        "times before, and you can do it again.",
        "Let's ground ourselves. Can you name 5 things you can see right now? "
        "This can help bring you back to the present.",
    ),
    ResponseCategory.HAPPY: (
        "That's wonderful! I'm so glad you're feeling good. What's bringing you joy today?",
        "It's great to hear you're doing well! Savoring positive moments is so important.",
        "Your happiness is contagious! Thank you for sharing this positive energy with me.",
    ),
    ResponseCategory.STRESSED: (
        "Stress can be tough to handle. Remember to take things one step at a time. "
        "What's one small thing you could do right now to help yourself?",
        "It sounds like you have a lot on your plate. Have you considered breaking down "
        "your tasks into smaller, manageable pieces?",
        "Taking care of yourself during stressful times is crucial. "
        "Have you had a chance to rest today?",
    ),
    ResponseCategory.GRATEFUL: (
        "Gratitude is such a powerful practice. It's wonderful that you're taking time "
        "to appreciate the good things.",
        "That's beautiful. Focusing on what we're grateful for can really shift our perspective.",
        "Thank you for sharing that. Practicing gratitude is one of the best things we can "
        "do for our mental health.",
    ),
    ResponseCategory.DEFAULT: (
        "I understand. Tell me more about how you're feeling.",
        "Thank you for sharing that with me. Your feelings matter.",
        "I'm here to listen and support you. What else would you like to talk about?",
        "That makes sense. How are you coping with everything?",
        "I appreciate you opening up. Remember, it's okay to feel whatever you're feeling.",
    ),
}


def get_response_category(message: str) -> ResponseCategory:
    """Pick the reply category from the first keyword group the message hits."""
    lower = message.lower()
    for category, pattern in _CATEGORY_PATTERNS:
        if pattern.search(lower):
            return category
    return ResponseCategory.DEFAULT


def pick_response(category: ResponseCategory, rng: random.Random | None = None) -> str:
    return (rng or random).choice(RESPONSES[category])
