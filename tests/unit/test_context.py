"""Unit tests for the profile context and prompt"""
import copy

import pytest

from portfolio.context import build_prompt, format_system_prompt, prepare_ai_context
from portfolio.resume import DATA


@pytest.mark.unit
class TestPrepareAIContext:
    """Test prepare_ai_context"""

    def test_profile_fields(self, profile_context):
        """Test that the static data is projected"""
        assert profile_context.name == DATA["name"]
        assert profile_context.location == "Assam, India"
        assert profile_context.skills == DATA["skills"]
        assert profile_context.contact.email == DATA["contact"]["email"]
        assert profile_context.contact.github.startswith("https://github.com/")

    def test_projects(self, profile_context):
        """Test that projects keep their order and links"""
        names = [p.name for p in profile_context.projects]
        assert names == ["PaperSightAI", "Sleek", "QuickPay", "Psychiatric Diagnosis"]
        assert profile_context.projects[0].website == "https://papersight.vercel.app"
        assert profile_context.projects[2].website is None
        assert profile_context.projects[0].status == "Active"

    def test_experience_summary(self, profile_context):
        """Test the one-line experience summary"""
        assert "ADP" in profile_context.experience

    def test_pure(self):
        """Test that repeated calls give equal contexts and leave the data untouched"""
        before = copy.deepcopy(DATA)
        assert prepare_ai_context() == prepare_ai_context()
        assert DATA == before

    def test_no_work_history(self):
        """Test the fallback experience line without jobs"""
        data = dict(DATA, work=[])
        assert "graduate" in prepare_ai_context(data).experience


@pytest.mark.unit
class TestPrompt:
    """Test system prompt and prompt assembly"""

    def test_system_prompt_content(self, profile_context):
        """Test that the persona prompt carries the profile"""
        prompt = format_system_prompt(profile_context)
        assert prompt.startswith(f"You are {profile_context.name}")
        assert "PROJECTS:" in prompt
        assert "QuickPay" in prompt
        assert f"Email: {profile_context.contact.email}" in prompt

    def test_build_prompt(self):
        """Test that the user turn is appended with the first-name cue"""
        prompt = build_prompt("What do you do?")
        assert prompt.startswith(format_system_prompt())
        assert prompt.endswith("\n\nUser: What do you do?\n\nFazlul:")
