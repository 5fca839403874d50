"""Optimisation settings exposed to clients.

The target model, tone and platform are chosen by the caller and echoed back
with every analysis so the rendering layer can label the output.
"""

from typing import List, Literal, NamedTuple

LlmModel = Literal[
    "claude-3-sonnet",
    "claude-3-opus",
    "claude-instant",
    "gpt-4-turbo",
    "gpt-3.5-turbo",
]

ToneStyle = Literal["professional", "friendly", "technical", "casual", "academic", "persuasive"]

TargetPlatform = Literal["chatgpt", "claude", "perplexity", "bard", "all"]


class ModelInfo(NamedTuple):
    label: str
    value: str
    provider: Literal["anthropic", "openai"]
    max_tokens: int


class Option(NamedTuple):
    label: str
    value: str


LLM_MODELS: List[ModelInfo] = [
    ModelInfo("Claude 3 Sonnet", "claude-3-sonnet", "anthropic", 200_000),
    ModelInfo("Claude 3 Opus", "claude-3-opus", "anthropic", 200_000),
    ModelInfo("Claude Instant", "claude-instant", "anthropic", 100_000),
    ModelInfo("GPT-4 Turbo", "gpt-4-turbo", "openai", 128_000),
    ModelInfo("GPT-3.5 Turbo", "gpt-3.5-turbo", "openai", 16_385),
]

TONE_STYLES: List[Option] = [
    Option("Professional", "professional"),
    Option("Friendly", "friendly"),
    Option("Technical", "technical"),
    Option("Casual", "casual"),
    Option("Academic", "academic"),
    Option("Persuasive", "persuasive"),
]

TARGET_PLATFORMS: List[Option] = [
    Option("ChatGPT", "chatgpt"),
    Option("Claude", "claude"),
    Option("Perplexity", "perplexity"),
    Option("Google Bard", "bard"),
    Option("All Platforms", "all"),
]

DEFAULT_MODEL: LlmModel = "claude-3-sonnet"
DEFAULT_TONE: ToneStyle = "professional"
DEFAULT_PLATFORM: TargetPlatform = "all"
