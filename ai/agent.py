"""Template-based responder answering as the site owner without the remote AI"""
from dataclasses import dataclass
from typing import Callable

from ai.topics import extract_message_topics
from domain.models import ProfileContext, ProjectContext
from portfolio.context import prepare_ai_context

FRONTEND_SKILLS = {
    "react.js", "next.js", "typescript", "javascript", "tailwindcss", "shadcn", "html5", "css3",
}
BACKEND_SKILLS = {
    "node.js", "express.js", "spring boot", "java", "python", "sql", "postgres", "prisma",
}
AI_MARKERS = ("ai", "machine", "gemini", "langchain")

PROJECT_KEYWORDS = ["project", "work", "built", "created"]

DEFAULT_INTENT = "default"


def _has_any(message: str, keywords: list[str]) -> bool:
    return any(keyword in message for keyword in keywords)


def _find_project(context: ProfileContext, keyword: str) -> ProjectContext | None:
    for project in context.projects:
        if keyword in project.name.lower().replace(" ", ""):
            return project
    return None


def _join(items: list[str], fallback: str) -> str:
    return ", ".join(items) if items else fallback


def _ai_skills(context: ProfileContext) -> list[str]:
    return [s for s in context.skills if any(m in s.lower() for m in AI_MARKERS)]


# -----------------------------------------------------------------------------
# Renderers
# -----------------------------------------------------------------------------

def _greeting(context: ProfileContext, message: str) -> str:
    company = context.work[0].company if context.work else "my current team"
    return (
        f"Hello! I'm {context.name}, a passionate full-stack developer from {context.location}. "
        "I love building scalable web applications and integrating AI/ML solutions to solve "
        f"real-world problems. I recently graduated in Computer Science and have been working at "
        f"{company}, where I've helped improve operational efficiency by 35%. "
        "What would you like to know about my journey?"
    )


def _skills(context: ProfileContext, message: str) -> str:
    frontend = [s for s in context.skills if s.lower() in FRONTEND_SKILLS][:4]
    backend = [s for s in context.skills if s.lower() in BACKEND_SKILLS][:4]
    ai_skills = _ai_skills(context)
    return (
        "I work with a comprehensive tech stack! On the frontend, I'm proficient in "
        f"{_join(frontend, 'modern JavaScript frameworks')}, creating responsive and user-friendly "
        f"interfaces. For backend development, I use {_join(backend, 'a range of server technologies')}, "
        "building robust and scalable server-side applications. I'm particularly passionate about "
        f"AI/ML technologies like {_join(ai_skills, 'machine learning')}. "
        "What specific technology interests you most?"
    )


def _project_renderer(keyword: str, blurb: str) -> Callable[[ProfileContext, str], str]:
    def render(context: ProfileContext, message: str) -> str:
        project = _find_project(context, keyword)
        technologies = ", ".join(project.technologies[:5]) if project else ""
        name = project.name if project else keyword
        return blurb.format(name=name, technologies=technologies)
    return render


_papersight = _project_renderer(
    "papersight",
    "{name} is one of my most exciting recent projects! It's a web application that uses "
    "Google's Gemini AI to summarize PDF documents, which makes it invaluable for researchers "
    "and professionals. I built it with {technologies}, and it can pull the key information out "
    "of a lengthy document in seconds, saving users hours of reading time!",
)

_sleek = _project_renderer(
    "sleek",
    "{name} is my full-stack e-commerce application that showcases modern web development "
    "practices! The stack is {technologies}, with PostgreSQL and Prisma ORM handling the data. "
    "It features a seamless shopping experience with secure payment processing and a polished "
    "user interface.",
)

_quickpay = _project_renderer(
    "quickpay",
    "{name} is my full-stack payment platform, similar to PayTM! It handles secure "
    "transactions, user authentication and bank linking, built with {technologies}. I "
    "integrated webhooks for real-time bank API communication and streamlined deployment "
    "with Docker and Turborepo.",
)


def _projects(context: ProfileContext, message: str) -> str:
    featured = [p.name for p in context.projects[:3]]
    return (
        "I've worked on several exciting projects that showcase different aspects of my skills! "
        f"My recent work includes {_join(featured, 'a few personal projects')}. Each project taught me "
        "something new, from AI integration to secure payment processing and modern e-commerce "
        "development. I also developed a machine learning model for psychiatric disorder "
        "prediction with 93% accuracy. Which project would you like to hear more about?"
    )


def _experience(context: ProfileContext, message: str) -> str:
    if not context.work:
        return (
            f"I'm {context.name}, and my professional background is in full-stack development. "
            f"Feel free to reach out at {context.contact.email} to hear more about it!"
        )
    job = context.work[0]
    return (
        f"I worked as a {job.title} at {job.company} in {job.location} ({job.period}). "
        "I collaborated with Agile teams to develop employee management and tracking systems "
        "that serve over 5,000 employees, building responsive front-end components with React "
        "and TypeScript and secure back-end functionality with Spring Boot. I'm proud that our "
        "solutions reduced manual HR tasks by 40% and improved operational efficiency by 35%!"
    )


def _contact(context: ProfileContext, message: str) -> str:
    return (
        "I'm always excited to discuss new opportunities and interesting projects! You can reach "
        f"me at {context.contact.email} for any professional inquiries. I'm also active on LinkedIn "
        "and GitHub where you can see more of my work. Whether it's a potential collaboration, a "
        "technical discussion or a job opportunity, I'd love to hear from you!"
    )


def _education(context: ProfileContext, message: str) -> str:
    if not context.education:
        return "I studied Computer Science. Feel free to ask me anything about what I learned!"
    edu = context.education[0]
    return (
        f"I completed my {edu.degree} from {edu.institution} ({edu.period}). During my studies, "
        "I focused on core computer science concepts like algorithms, data structures, machine "
        "learning, and artificial intelligence, along with computer vision, compiler design, "
        "operating systems, and computer networks. The combination of academic learning and "
        "hands-on coding has been invaluable in my development journey!"
    )


def _ai(context: ProfileContext, message: str) -> str:
    ai_projects = [
        p for p in context.projects
        if any(m in t.lower() for t in p.technologies for m in ("ai", "ml", "gemini"))
    ]
    project_line = (
        f"In projects like {ai_projects[0].name}, I've integrated AI to create intelligent "
        "document summarization capabilities. "
        if ai_projects else ""
    )
    return (
        "I'm really passionate about AI and machine learning! I've worked extensively with "
        f"{_join(_ai_skills(context), 'machine learning tools')}. {project_line}I also developed a "
        "psychiatric disorder prediction model using multiple ML algorithms that achieved 93% "
        "accuracy. I love exploring how AI can solve real-world problems!"
    )


def _location(context: ProfileContext, message: str) -> str:
    return (
        f"I'm from {context.location}, a beautiful part of Northeast India known for its tea "
        "gardens and rich culture! Working remotely gives me the flexibility to contribute to "
        "global projects while staying connected to my roots, and I love being part of India's "
        "vibrant tech ecosystem."
    )


def _frontend(context: ProfileContext, message: str) -> str:
    return (
        "I'm really passionate about modern frontend development! I work extensively with "
        "React.js and Next.js, which I find perfect for building scalable, performant web "
        "applications. TypeScript is my go-to choice because it adds type safety and makes code "
        "more maintainable. In my projects I've leveraged Next.js features like server-side "
        "rendering and API routes, and I love keeping up with the latest React patterns!"
    )


def _backend(context: ProfileContext, message: str) -> str:
    return (
        "I enjoy working on both sides of the stack! For backend development, I use Node.js with "
        "Express.js for JavaScript projects and Spring Boot with Java for enterprise applications. "
        "I've built secure, scalable systems with Spring Security and Spring Data JPA, and I use "
        "PostgreSQL with Prisma ORM for type-safe database operations!"
    )


def _goals(context: ProfileContext, message: str) -> str:
    return (
        "I'm excited about continuing to grow as a full-stack developer while deepening my "
        "expertise in AI/ML integration! My immediate goals include expanding my knowledge of "
        "cloud technologies like AWS and exploring more advanced AI frameworks. Long-term, I'd "
        "love to work on products that have a meaningful impact on people's lives!"
    )


def _default(context: ProfileContext, message: str) -> str:
    featured = " and ".join(p.name for p in context.projects[:2]) or "my side projects"
    return (
        f"That's a great question! I'm {context.name}, a full-stack developer passionate about "
        f"building innovative web applications and AI solutions. I love discussing technology, "
        f"sharing experiences about projects like {featured}, or talking about my professional "
        "work. Whether you're curious about my technical skills, project experiences, or the "
        "latest in web development and AI, I'm here to help! What would you like to explore?"
    )


@dataclass(frozen=True)
class TemplateRule:
    """One (predicate, renderer) entry of the response table"""
    name: str
    matches: Callable[[str], bool]
    render: Callable[[ProfileContext, str], str]


def _keywords(*keywords: str) -> Callable[[str], bool]:
    return lambda message: _has_any(message, list(keywords))


def _project_named(keyword: str) -> Callable[[str], bool]:
    return lambda message: _has_any(message, PROJECT_KEYWORDS) and keyword in message


# Evaluated top to bottom; the first match wins.
TEMPLATE_RULES: list[TemplateRule] = [
    TemplateRule("greeting", _keywords("hello", "hi", "hey", "introduce", "who are you"), _greeting),
    TemplateRule(
        "skills",
        _keywords("skill", "technology", "tech stack", "programming", "languages"),
        _skills,
    ),
    TemplateRule("project:papersight", _project_named("papersight"), _papersight),
    TemplateRule("project:sleek", _project_named("sleek"), _sleek),
    TemplateRule("project:quickpay", _project_named("quickpay"), _quickpay),
    TemplateRule("projects", _keywords(*PROJECT_KEYWORDS), _projects),
    TemplateRule(
        "experience",
        _keywords("experience", "background", "career", "adp", "job"),
        _experience,
    ),
    TemplateRule(
        "contact",
        _keywords("contact", "hire", "available", "reach", "email", "connect"),
        _contact,
    ),
    TemplateRule(
        "education",
        _keywords("education", "study", "university", "degree", "nehu"),
        _education,
    ),
    TemplateRule(
        "ai",
        _keywords("ai", "ml", "machine learning", "artificial intelligence", "gemini"),
        _ai,
    ),
    TemplateRule("location", _keywords("location", "where", "from", "assam", "india"), _location),
    TemplateRule("frontend", _keywords("react", "next.js", "typescript"), _frontend),
    TemplateRule(
        "backend",
        _keywords("backend", "server", "api", "spring boot", "express"),
        _backend,
    ),
    TemplateRule("goals", _keywords("goal", "future", "plan", "aspiration", "next"), _goals),
]


class TemplateAgent:
    """Answers visitor questions from static profile data using keyword intents"""

    def __init__(self, rules: list[TemplateRule] | None = None, data: dict | None = None) -> None:
        self.rules = rules if rules is not None else TEMPLATE_RULES
        self.data = data

    def _context(self) -> ProfileContext:
        if self.data is None:
            return prepare_ai_context()
        return prepare_ai_context(self.data)

    def detect_intent(self, message: str) -> str:
        """Name of the first rule matching the message, or 'default'"""
        message_lower = message.lower()
        for rule in self.rules:
            if rule.matches(message_lower):
                return rule.name
        return DEFAULT_INTENT

    def get_response(self, message: str) -> str:
        """Deterministic canned reply for a message"""
        context = self._context()
        message_lower = message.lower()
        for rule in self.rules:
            if rule.matches(message_lower):
                return rule.render(context, message_lower)
        return _default(context, message_lower)

    def get_enhanced_response(self, message: str) -> str:
        """Template reply followed by a topic-aware follow-up paragraph"""
        context = self._context()
        topics = extract_message_topics(message, context)
        response = self.get_response(message)

        skill = next((t.split(":", 1)[1] for t in topics if t.startswith("skill:")), None)
        if skill:
            return (
                f"{response}\n\nI see you're interested in {skill} specifically! I'd be happy to "
                "share more details about my experience with it and how I've used it in my projects."
            )

        project = next((t.split(":", 1)[1] for t in topics if t.startswith("project:")), None)
        if project:
            return (
                f"{response}\n\nGreat question about {project}! I'm particularly proud of that "
                "project and would love to discuss the technical challenges, solutions, and what "
                "I learned from building it."
            )

        if "category:experience" in topics:
            return (
                f"{response}\n\nI love sharing about my journey in tech! Feel free to ask about any "
                "specific aspect of my experience, the challenges I've faced, or the projects I've "
                "been part of."
            )

        if "category:ai" in topics:
            return (
                f"{response}\n\nAI and machine learning are such exciting fields! I'm always eager "
                "to discuss the latest developments or how AI is transforming the way we build "
                "applications."
            )

        if not topics:
            return (
                f"{response}\n\nI'm here to chat about anything related to my experience, "
                "projects, or the tech world in general. What would you like to explore together?"
            )

        return response
