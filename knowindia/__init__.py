"""
Know India - translation gateway for a multilingual travel site.

Routes translation requests to Hugging Face models, caches results and
keeps serving (original text) when the upstream is slow or failing.
"""

__version__ = "0.1.0"
