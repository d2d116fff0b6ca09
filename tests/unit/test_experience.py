"""
Tests for work-experience extraction.
"""

from sifter.contexts.extraction.experience import (
    extract_experience,
    split_at_last_comma,
    split_company_duration,
)
from sifter.contexts.extraction.record_components import ExperienceEntry


class TestExtractExperience:
    def test_single_entry_with_continuation(self):
        """Company/duration, role/location, bullet with a wrapped line."""
        text = (
            "Acme Corp  Jan 2020 - Present\n"
            "Engineer, Remote\n"
            "• Built the thing\n"
            "improved performance"
        )
        entries = extract_experience(text)
        assert entries == [
            ExperienceEntry(
                company="Acme Corp",
                role="Engineer",
                duration="Jan 2020 - Present",
                location="Remote",
                bullets=["Built the thing improved performance"],
            )
        ]

    def test_standalone_glyph_bullets(self):
        text = "Acme Corp Jan 2020 - Present\nEngineer, Remote\n•\nBuilt X\n•\nShipped Y"
        entries = extract_experience(text)
        assert entries[0].bullets == ["Built X", "Shipped Y"]

    def test_multiple_entries(self):
        text = (
            "Acme Corp  Jan 2020 - Present\n"
            "Engineer, Remote\n"
            "• Built A\n"
            "Beta Inc  Mar 2018 - Dec 2019\n"
            "Intern, Boston, MA\n"
            "• Built B\n"
        )
        entries = extract_experience(text)
        assert [e.company for e in entries] == ["Acme Corp", "Beta Inc"]
        assert entries[1].duration == "Mar 2018 - Dec 2019"
        assert entries[1].role == "Intern, Boston"
        assert entries[1].location == "MA"
        assert entries[0].bullets == ["Built A"]
        assert entries[1].bullets == ["Built B"]

    def test_bare_year_range_keeps_whole_line_as_company(self):
        entries = extract_experience("Acme 2019 - 2021\nEngineer")
        assert entries[0].company == "Acme 2019 - 2021"
        assert entries[0].duration == ""

    def test_role_without_comma(self):
        entries = extract_experience("Acme Corp Jan 2020 - Present\nStaff Engineer")
        assert entries[0].role == "Staff Engineer"
        assert entries[0].location == ""

    def test_stray_text_becomes_first_bullet(self):
        text = "Acme Corp Jan 2020 - Present\nEngineer\nOwned billing\nand invoicing"
        entries = extract_experience(text)
        assert entries[0].bullets == ["Owned billing and invoicing"]

    def test_company_line_last(self):
        entries = extract_experience("Acme Corp Jan 2020 - Present")
        assert entries == [ExperienceEntry(company="Acme Corp", duration="Jan 2020 - Present")]

    def test_lines_before_first_entry_ignored(self):
        text = "Selected roles below\nAcme Corp Jan 2020 - Present\nEngineer"
        entries = extract_experience(text)
        assert len(entries) == 1
        assert entries[0].company == "Acme Corp"

    def test_bullet_mentioning_year_stays_bullet(self):
        text = "Acme Corp Jan 2020 - Present\nEngineer\n• Grew revenue 30% in 2021\n• Hired 4"
        entries = extract_experience(text)
        assert len(entries) == 1
        assert entries[0].bullets == ["Grew revenue 30% in 2021", "Hired 4"]

    def test_no_dated_line_yields_no_entries(self):
        assert extract_experience("Engineer\n• Built things") == []

    def test_empty_section(self):
        assert extract_experience("") == []

    def test_bullets_preserve_document_order(self):
        text = "Acme Jan 2020 - Present\nEng\n• one\n• two\n• three"
        assert extract_experience(text)[0].bullets == ["one", "two", "three"]


class TestSplitCompanyDuration:
    def test_splits_at_month(self):
        assert split_company_duration("Globex  Sept 2017 - Aug 2019") == (
            "Globex",
            "Sept 2017 - Aug 2019",
        )

    def test_month_inside_word_ignored(self):
        """'Mar' in 'Marketing' is not a month token."""
        assert split_company_duration("Marketing Pros 2020 - 2022") == (
            "Marketing Pros 2020 - 2022",
            "",
        )

    def test_full_month_name(self):
        assert split_company_duration("Initech December 2015 - Present") == (
            "Initech",
            "December 2015 - Present",
        )


class TestSplitAtLastComma:
    def test_last_comma(self):
        assert split_at_last_comma("Engineer, Platform, Berlin") == ("Engineer, Platform", "Berlin")

    def test_no_comma(self):
        assert split_at_last_comma("Engineer") == ("Engineer", "")
