"""Profile context projection and system prompt construction"""
from domain.models import (
    ContactContext,
    EducationContext,
    ProfileContext,
    ProjectContext,
    WorkContext,
)
from portfolio.resume import DATA

ROLE = "Full-stack Developer"
PERSONALITY = (
    "Passionate, results-driven developer with a keen interest in AI/ML and building "
    "scalable solutions. Friendly, professional, and always eager to discuss technology "
    "and innovation."
)


def _link(links: list[dict], link_type: str) -> str | None:
    for link in links:
        if link.get("type") == link_type:
            return link.get("href")
    return None


def prepare_ai_context(data: dict = DATA) -> ProfileContext:
    """Project the static resume data into a ProfileContext

    Built fresh on every call; the result is a pure function of the data.
    """
    projects = [
        ProjectContext(
            name=project["title"],
            description=project["description"],
            technologies=list(project["technologies"]),
            status="Active" if project.get("active") else "Completed",
            dates=project["dates"],
            website=_link(project.get("links", []), "Website"),
            source=_link(project.get("links", []), "Source"),
        )
        for project in data["projects"]
    ]

    education = [
        EducationContext(
            institution=edu["school"],
            degree=edu["degree"],
            period=f"{edu['start']} - {edu['end']}",
            description=edu.get("description"),
        )
        for edu in data["education"]
    ]

    work = [
        WorkContext(
            company=job["company"],
            title=job["title"],
            location=job["location"],
            period=f"{job['start']} - {job['end']}",
            description=job["description"],
        )
        for job in data["work"]
    ]

    social = data["contact"].get("social", {})
    contact = ContactContext(
        email=data["contact"]["email"],
        phone=data["contact"]["tel"],
        github=social.get("GitHub", {}).get("url"),
        linkedin=social.get("LinkedIn", {}).get("url"),
        twitter=social.get("X", {}).get("url"),
    )

    if work:
        experience = f"{work[0].title} at {work[0].company} ({work[0].period})"
    else:
        experience = "Recent B.Tech graduate with 1+ year of professional experience"

    return ProfileContext(
        name=data["name"],
        role=ROLE,
        location=data["location"],
        experience=experience,
        skills=list(data["skills"]),
        projects=projects,
        education=education,
        work=work,
        contact=contact,
        personality=PERSONALITY,
        summary=data["summary"],
    )


def format_system_prompt(context: ProfileContext | None = None) -> str:
    """Persona instructions sent ahead of every user message"""
    context = context or prepare_ai_context()

    projects = "\n".join(
        f"- {p.name} ({p.status}): {p.description}\n  Technologies: {', '.join(p.technologies)}"
        for p in context.projects
    )
    education = "\n".join(
        f"- {e.degree} from {e.institution} ({e.period})" for e in context.education
    )
    links = [f"Email: {context.contact.email}"]
    if context.contact.linkedin:
        links.append(f"LinkedIn: {context.contact.linkedin}")
    if context.contact.github:
        links.append(f"GitHub: {context.contact.github}")

    return f"""You are {context.name}, a {context.role} from {context.location}.
You are having a conversation with a visitor to your portfolio website. Respond as yourself in first person,
maintaining a {context.personality.lower()} tone.

BACKGROUND:
{context.summary}

EXPERIENCE:
{context.experience}

SKILLS:
{', '.join(context.skills)}

PROJECTS:
{projects}

EDUCATION:
{education}

CONTACT:
{chr(10).join(links)}

INSTRUCTIONS:
- Respond as {context.name} in first person
- Be conversational, friendly, and professional
- Reference specific projects, skills, or experiences when relevant
- If asked about something not in your background, politely redirect or suggest contacting you directly
- Keep responses concise but informative (2-3 sentences typically)
- Show enthusiasm for technology and your work
- If asked about availability or hiring, mention they can reach out via email"""


def build_prompt(message: str, context: ProfileContext | None = None) -> str:
    """Full prompt for a single user turn"""
    context = context or prepare_ai_context()
    first_name = context.name.split()[0]
    return f"{format_system_prompt(context)}\n\nUser: {message}\n\n{first_name}:"
