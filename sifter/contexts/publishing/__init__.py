"""
Publishing Context

Responsibilities:
- Writes extracted records as JSON
- Keeps the raw text and original document next to the record

Owns: Output files and directory layout
Never: Modifies record content
"""
