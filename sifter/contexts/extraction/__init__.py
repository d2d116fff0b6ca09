"""
Extraction Context

Responsibilities:
- Normalizes flattened résumé text into lines
- Segments text into header and section regions
- Extracts contact details, skills, experience, projects, education and certifications
- Assembles the structured ResumeRecord

Owns: Text heuristics and the record data model
Never: Converts documents to text (ResumeRecord.from_file delegates to intake) or writes results
"""
