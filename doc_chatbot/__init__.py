"""
Document chatbot: S3-cached document chunking behind an API Gateway Lambda.
"""

__version__ = "0.1.0"
