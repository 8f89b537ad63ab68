"""
Example: JSON-mode relay through both providers

Sends the same conversation to DeepSeek and to the OpenAI Responses API and
prints the normalized payloads. Needs DEEPSEEK_API_KEY and/or OPENAI_API_KEY.
"""

import asyncio
import json

from dotenv import load_dotenv

from llm_relay import ConversationMessage, ConversationRole, ProviderError, RelayClient


MESSAGES = [
    ConversationMessage(
        role=ConversationRole.SYSTEM,
        content="Answer with a JSON object of the form {\"items\": [string]}."
    ),
    ConversationMessage(
        role=ConversationRole.USER,
        content="List three primary colours."
    ),
]


async def example_single_provider(client: RelayClient, provider: str):
    """Relay one request and show the normalized response."""
    print(f"=== {provider} ===\n")

    try:
        response = await client.generate(MESSAGES, meta={"type": "example"}, provider=provider)
    except ProviderError as e:
        print(f"Failed ({e.status_code}): {e.message}\n")
        return

    print(f"Model: {response.model}")
    print(f"Meta:  {response.meta}")
    try:
        print(json.dumps(json.loads(response.content), indent=2))
    except ValueError:
        # JSON mode biases the output, it does not guarantee it
        print(response.content)
    print()


async def main():
    load_dotenv()
    client = RelayClient()

    print("Provider status:", client.get_provider_status(), "\n")
    for provider in ("deepseek", "openai"):
        await example_single_provider(client, provider)


if __name__ == "__main__":
    asyncio.run(main())
