"""
Services layer - Business logic goes here.
Keep services focused on specific domains (chat, AI assistance, etc.)

DESIGN PRINCIPLE:
- Services contain business logic, NOT routes
- chatbot: deterministic intent routing with canned replies
- ai_service: fail-soft AI helpers over the ai_plugin providers
"""
