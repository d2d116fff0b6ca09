"""
SIFTER - Structured Information From Text-Extracted Résumés

A heuristic résumé parser that turns the flattened text of a résumé
document into a structured record.

Architecture:
- Intake Context: Document loading and text flattening
- Extraction Context: Section segmentation and field extraction
- Publishing Context: Record and artifact output
"""

__version__ = "0.1.0"
