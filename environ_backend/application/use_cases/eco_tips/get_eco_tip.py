from ....infrastructure.external.gemini_client import GeminiClient

ECO_TIP_PROMPT = (
    "You are an eco-friendly chatbot for the EnviRon app. Provide a concise eco-tip or "
    "answer related to sustainability, recycling, or climate change based on the user's "
    "input. Keep the response under 100 words and focus on actionable advice. "
    'User input: "{message}"'
)


class GetEcoTipUseCase:
    """Answer a sustainability question with a short, actionable tip"""

    def __init__(self, gemini_client: GeminiClient) -> None:
        self.gemini_client = gemini_client

    async def execute(self, message: str) -> str:
        """
        Raises:
            ValueError: Blank message
            TextGenerationError: The text model failed
        """
        message = (message or "").strip()
        if not message:
            raise ValueError("Please enter a message.")

        reply = await self.gemini_client.generate_text(ECO_TIP_PROMPT.format(message=message))
        return reply.strip()
