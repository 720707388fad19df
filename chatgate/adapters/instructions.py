"""
Instructions - Fixed assistant instruction shared by both providers.
"""

# "You are a kind AI assistant. Please answer everything in Korean."
SYSTEM_INSTRUCTION = "당신은 친절한 AI 어시스턴트입니다. 모든 답변을 한국어로 해주세요."
