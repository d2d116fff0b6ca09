"""
Tests for categorized skills extraction.
"""

from sifter.contexts.extraction.skills import extract_skills, split_skill_list


class TestExtractSkills:
    def test_categories_and_column_gaps(self):
        """Commas split tokens; runs of 2+ spaces are column gaps."""
        skills = extract_skills("Languages: Python, Go, C++\nCloud:  AWS   GCP")
        assert skills == {"Languages": ["Python", "Go", "C++"], "Cloud": ["AWS", "GCP"]}

    def test_slashes_split(self):
        skills = extract_skills("Databases: Postgres/MySQL / Redis")
        assert skills == {"Databases": ["Postgres", "MySQL", "Redis"]}

    def test_duplicates_removed_in_first_seen_order(self):
        skills = extract_skills("Tools: Git, Docker, Git, Make, Docker")
        assert skills["Tools"] == ["Git", "Docker", "Make"]

    def test_symbol_in_category_skips_line(self):
        skills = extract_skills("Frameworks & Libraries: React")
        # '&' is not a category character, so the line is skipped
        assert skills == {}

    def test_multiword_category_trimmed(self):
        skills = extract_skills("Cloud Platforms : AWS, GCP")
        assert skills == {"Cloud Platforms": ["AWS", "GCP"]}

    def test_uncategorized_lines_skipped(self):
        skills = extract_skills("Python, Go, Rust\nLanguages: Python")
        assert skills == {"Languages": ["Python"]}

    def test_empty_values_discarded(self):
        skills = extract_skills("Languages: Python,, ,Go,")
        assert skills == {"Languages": ["Python", "Go"]}

    def test_empty_section(self):
        assert extract_skills("") == {}

    def test_category_with_no_skills(self):
        assert extract_skills("Languages:") == {"Languages": []}


class TestSplitSkillList:
    def test_mixed_separators(self):
        assert split_skill_list("A, B/C  D") == ["A", "B", "C", "D"]

    def test_single_spaces_kept_inside_token(self):
        assert split_skill_list("Spring Boot, Node JS") == ["Spring Boot", "Node JS"]
