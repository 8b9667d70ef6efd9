"""
Core functionality for the Video Talk application.

This package contains modules for extracting video ids, fetching and
formatting transcripts, storing conversations and answering questions.
"""
