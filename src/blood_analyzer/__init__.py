"""
Blood Report Analyzer

Turns OCR text from a photographed blood test report into classified
marker values and a plain-language summary.
"""

__version__ = "0.1.0"
