from __future__ import annotations

from dataclasses import dataclass

SYSTEM_PROMPT = (
    "You are an AI assistant specialized in summarizing meeting notes and transcripts. "
    "Please follow the user's specific instructions carefully and provide a well-structured, "
    "professional summary."
)

QUICK_PROMPTS = [
    "Summarize in bullet points for executives",
    "Highlight only action items and deadlines",
    "Create a detailed meeting recap with key decisions",
    "Extract key insights and next steps",
    "Focus on financial discussions and budget decisions",
    "Identify risks and mitigation strategies mentioned",
]


@dataclass(frozen=True)
class Prompt:
    system: str
    user: str

    def messages(self) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


def build_prompt(content: str, instruction: str) -> Prompt:
    # transcript and instruction are interpolated as-is
    user = (
        "Here is a meeting transcript/notes:\n"
        "\n"
        f"{content}\n"
        "\n"
        f"Please process this according to the following instructions: {instruction}\n"
        "\n"
        "Make sure your response is well-formatted and professional."
    )
    return Prompt(system=SYSTEM_PROMPT, user=user)
