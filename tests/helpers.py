"""Shared test doubles for the suite."""

from civic_connect.services.ai_plugin import AIProviderError, TextGenerator

SITE = "https://mumbai-civic-connect.vercel.app"


class FakeGenerator(TextGenerator):
    """In-process generator: returns a canned reply or raises."""

    def __init__(self, reply=None, error=None, name="fake"):
        self.reply = reply
        self.error = error
        self.name = name
        self.prompts = []

    def is_enabled(self):
        return True

    def get_model_info(self):
        return {"name": self.name, "version": "test"}

    def get_timeout_seconds(self):
        return 1.0

    def generate_text(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class DisabledGenerator(FakeGenerator):
    def is_enabled(self):
        return False

    def generate_text(self, prompt):
        raise AIProviderError("disabled")
