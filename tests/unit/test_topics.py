"""Unit tests for topic extraction"""
import pytest

from ai.topics import TOPIC_KEYWORDS, extract_message_topics


@pytest.mark.unit
class TestExtractMessageTopics:
    """Test extract_message_topics"""

    def test_skills_in_profile_order(self, profile_context):
        """Test that skills are tagged in the order the profile lists them"""
        topics = extract_message_topics("I love Next.js and React.js", profile_context)
        assert topics.index("skill:React.js") < topics.index("skill:Next.js")

    def test_project_tag(self, profile_context):
        """Test that project names are tagged"""
        topics = extract_message_topics("Tell me about QuickPay", profile_context)
        assert "project:QuickPay" in topics

    def test_case_insensitive(self, profile_context):
        """Test that matching ignores case"""
        assert "skill:Docker" in extract_message_topics("do you use DOCKER", profile_context)

    def test_no_duplicates(self, profile_context):
        """Test that a tag repeated in the message appears once"""
        topics = extract_message_topics("react.js React.js REACT.JS", profile_context)
        assert topics.count("skill:React.js") == 1
        assert len(topics) == len(set(topics))

    def test_categories_in_declared_order(self, profile_context):
        """Test that categories follow keyword group order"""
        topics = extract_message_topics("What projects have you built at your job?", profile_context)
        categories = [t for t in topics if t.startswith("category:")]
        assert categories == ["category:experience", "category:projects"]

    def test_tag_groups_ordered(self, profile_context):
        """Test that skills come before projects and projects before categories"""
        topics = extract_message_topics("Which technology did you use for Sleek, Prisma?", profile_context)
        assert topics.index("skill:Prisma") < topics.index("project:Sleek")
        assert topics.index("project:Sleek") < topics.index("category:skills")

    def test_no_topics(self, profile_context):
        """Test that unrelated text yields no tags"""
        assert extract_message_topics("xyz qwerty", profile_context) == []

    def test_default_context(self):
        """Test that the profile context is built when none is given"""
        assert "skill:Python" in extract_message_topics("python please")

    @pytest.mark.parametrize("category", sorted(TOPIC_KEYWORDS))
    def test_each_category_detectable(self, profile_context, category):
        """Test that the first keyword of every group tags its category"""
        keyword = TOPIC_KEYWORDS[category][0]
        assert f"category:{category}" in extract_message_topics(f"about {keyword}", profile_context)
