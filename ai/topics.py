"""Topic extraction used to steer fallback responses"""
from domain.models import ProfileContext
from portfolio.context import prepare_ai_context

# Category keyword groups - a category is tagged when any keyword appears
TOPIC_KEYWORDS = {
    "experience": ["experience", "work", "job", "career", "professional"],
    "education": ["education", "study", "university", "degree", "school"],
    "projects": ["project", "built", "created", "developed", "application"],
    "skills": ["skill", "technology", "tech", "programming", "language"],
    "contact": ["contact", "reach", "hire", "available", "email"],
    "ai": ["ai", "artificial intelligence", "machine learning", "ml", "gemini"],
}


def extract_message_topics(message: str, context: ProfileContext | None = None) -> list[str]:
    """Return the topic tags found in a message

    Tags are ``skill:<Name>``, ``project:<Name>`` and ``category:<group>``,
    each at most once, in profile order followed by category order.
    """
    context = context or prepare_ai_context()
    lower_message = message.lower()
    topics: list[str] = []

    for skill in context.skills:
        tag = f"skill:{skill}"
        if skill.lower() in lower_message and tag not in topics:
            topics.append(tag)

    for project in context.projects:
        tag = f"project:{project.name}"
        if project.name.lower() in lower_message and tag not in topics:
            topics.append(tag)

    for topic, keywords in TOPIC_KEYWORDS.items():
        if any(keyword in lower_message for keyword in keywords):
            topics.append(f"category:{topic}")

    return topics
