"""
Intake Context

Responsibilities:
- Loads source documents (PDF, plain text)
- Flattens them into the single text blob the extraction context consumes

Owns: Document-to-text conversion
Never: Interprets résumé structure
"""
