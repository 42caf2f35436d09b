"""Unit tests for TemplateAgent"""
import pytest

from ai.agent import (
    TEMPLATE_RULES,
    TemplateAgent,
    TemplateRule,
)


@pytest.mark.unit
class TestTemplateAgentIntentDetection:
    """Test TemplateAgent intent detection logic"""

    @pytest.mark.parametrize("message, intent", [
        ("Hello there", "greeting"),
        ("Who are you?", "greeting"),
        ("What are your skills?", "skills"),
        ("What is your tech stack", "skills"),
        ("Tell me about the PaperSight project", "project:papersight"),
        ("How was the Sleek project built", "project:sleek"),
        ("Did you work on QuickPay alone", "project:quickpay"),
        ("Show me your projects", "projects"),
        ("Tell me about your ADP experience", "experience"),
        ("How can I contact you?", "contact"),
        ("Where did you study?", "education"),
        ("Do you use Gemini?", "ai"),
        ("Where are you based?", "location"),
        ("Do you like react?", "frontend"),
        ("Do you write backend code?", "backend"),
        ("What are your goals?", "goals"),
    ])
    def test_detect_intent(self, template_agent, message, intent):
        """Test that each question maps to the expected rule"""
        assert template_agent.detect_intent(message) == intent

    def test_detect_default_intent(self, template_agent):
        """Test that unmatched messages fall through to default"""
        assert template_agent.detect_intent("xyz qwerty") == "default"

    def test_specific_project_wins_over_generic(self, template_agent):
        """Test that a named project is matched before the generic projects rule"""
        assert template_agent.detect_intent("Tell me about your project PaperSight") == "project:papersight"

    def test_project_name_alone_is_not_specific(self, template_agent):
        """Test that a project rule needs a project keyword as well as the name"""
        assert template_agent.detect_intent("quickpay") != "project:quickpay"

    def test_case_insensitive(self, template_agent):
        """Test intent detection is case insensitive"""
        assert template_agent.detect_intent("WHAT ARE YOUR SKILLS") == "skills"

    def test_custom_rules(self):
        """Test that an injected rule table replaces the default one"""
        rule = TemplateRule(
            name="weather",
            matches=lambda message: "weather" in message,
            render=lambda context, message: "Sunny in " + context.location,
        )
        agent = TemplateAgent(rules=[rule])
        assert agent.detect_intent("How is the weather?") == "weather"
        assert agent.get_response("How is the weather?") == "Sunny in Assam, India"
        assert agent.detect_intent("What are your skills?") == "default"


@pytest.mark.unit
class TestTemplateAgentResponses:
    """Test TemplateAgent response rendering"""

    def test_skills_response(self, template_agent, profile_context):
        """Test that the skills answer names real skills"""
        response = template_agent.get_response("What are your skills?")
        assert any(skill in response for skill in profile_context.skills)
        assert "undefined" not in response
        assert "None" not in response

    def test_project_response_names_project(self, template_agent):
        """Test that the PaperSight answer names the project and its stack"""
        response = template_agent.get_response("Tell me about the PaperSight project")
        assert "PaperSightAI" in response
        assert "Gemini" in response

    def test_greeting_mentions_owner(self, template_agent, profile_context):
        """Test that the greeting introduces the site owner"""
        response = template_agent.get_response("hello")
        assert profile_context.name in response
        assert profile_context.location in response

    def test_experience_mentions_company(self, template_agent):
        """Test that the experience answer names the employer"""
        assert "ADP" in template_agent.get_response("Tell me about your career")

    def test_contact_mentions_email(self, template_agent, profile_context):
        """Test that the contact answer includes the email address"""
        assert profile_context.contact.email in template_agent.get_response("How can I contact you?")

    def test_education_mentions_institution(self, template_agent):
        """Test that the education answer names the institution"""
        assert "NEHU" in template_agent.get_response("Where did you study?")

    def test_default_response(self, template_agent, profile_context):
        """Test the default answer for unmatched input"""
        response = template_agent.get_response("xyz qwerty")
        assert profile_context.name in response
        assert "What would you like to explore?" in response

    def test_deterministic(self, template_agent):
        """Test that the same message always yields the same answer"""
        for message in ("What are your skills?", "xyz qwerty", "Where are you based?"):
            assert template_agent.get_response(message) == template_agent.get_response(message)

    @pytest.mark.parametrize("rule", TEMPLATE_RULES, ids=lambda rule: rule.name)
    def test_every_rule_renders_text(self, template_agent, profile_context, rule):
        """Test that every renderer produces non-empty text"""
        text = rule.render(profile_context, "question")
        assert text.strip()
        assert "undefined" not in text


@pytest.mark.unit
class TestTemplateAgentEnhancedResponse:
    """Test topic-aware follow-ups"""

    def test_skill_follow_up(self, template_agent):
        """Test that a named skill gets a skill-specific follow-up"""
        response = template_agent.get_enhanced_response("Tell me about React.js")
        assert "interested in React.js specifically" in response

    def test_project_follow_up(self, template_agent):
        """Test that a named project gets a project-specific follow-up"""
        response = template_agent.get_enhanced_response("What about Sleek?")
        assert "Great question about Sleek!" in response

    def test_ai_follow_up(self, template_agent):
        """Test that AI questions without a named skill get the AI follow-up"""
        response = template_agent.get_enhanced_response("Do you do ml research")
        assert "AI and machine learning are such exciting fields" in response

    def test_no_topic_follow_up(self, template_agent):
        """Test the generic follow-up when no topic is found"""
        response = template_agent.get_enhanced_response("xyz qwerty")
        assert response.startswith(template_agent.get_response("xyz qwerty"))
        assert response.endswith("What would you like to explore together?")
