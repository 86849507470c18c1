"""
Gemini-backed agents and the local tools they may call.
"""
