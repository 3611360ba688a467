"""OpenAI Responses API client for label analysis."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from foodcheck.services.analysis import AnalysisProvider


@dataclass
class OpenAIAnalysisClient(AnalysisProvider):
    """Analysis provider backed by the OpenAI Responses API."""

    client: AsyncOpenAI
    max_output_tokens: int = 2000

    @classmethod
    def create(cls, api_key: str) -> "OpenAIAnalysisClient":
        """Create an OpenAI analysis client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def analyze(self, *, model: str, image_data_url: str, prompt: str) -> str:
        """Send the label image with the prompt and return the raw text answer."""
        response = await self.client.responses.create(
            model=model,
            input=[
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": prompt},
                        {"type": "input_image", "image_url": image_data_url},
                    ],
                }
            ],
            max_output_tokens=self.max_output_tokens,
        )
        return response.output_text or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
