"""
REST API module for cpgview.

Provides FastAPI endpoints for:
- Function name search
- One-hop call neighborhood graphs
- Source extraction for graph nodes
- Health and store statistics
"""
