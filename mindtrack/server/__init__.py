"""
MindTrack HTTP server
"""
