"""
drinkmatch - Quiz-driven drink recommendations.

Flow:
- Quiz: a short multi-step preference quiz (age, region, setting, ...)
- Recommend: OpenAI picks a real drink and describes why it fits
- Illustrate: DALL-E renders someone enjoying it
"""

__version__ = "1.0.0"
