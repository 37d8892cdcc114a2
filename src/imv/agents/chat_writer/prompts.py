"""Prompts for the Chat Writer agent."""

from imv.schemas.chat import WritingMode

# Extra instructions appended per writing mode; general adds nothing
WRITING_MODE_CONTEXT: dict[WritingMode, str] = {
    WritingMode.GENERAL: "",
    WritingMode.EMAIL: """
The user is writing an email. Structure your response as a complete email with:
- Appropriate greeting
- Clear body paragraphs
- Professional sign-off
Match the formality to the context (internal vs external, peer vs executive).""",
    WritingMode.LINKEDIN: """
The user is writing a LinkedIn post. Make it:
- Engaging hook in the first line
- Easy to scan (short paragraphs, line breaks)
- Professional but personable
- Include a call-to-action or question at the end
- Appropriate length (150-300 words for posts)""",
    WritingMode.TWITTER: """
The user is writing for Twitter/X. Make it:
- Punchy and concise (under 280 characters for single tweets)
- If it's a thread, number each tweet and keep them standalone but connected
- Conversational and engaging
- Use line breaks for readability""",
    WritingMode.SLACK: """
The user is writing a Slack message. Make it:
- Concise and scannable
- Friendly but professional
- Use bullet points if listing multiple items
- Direct and action-oriented""",
    WritingMode.FORMAL_LETTER: """
The user is writing a formal letter. Structure it with:
- Proper letter formatting (date, addresses if needed)
- Formal salutation
- Clear, well-organized paragraphs
- Professional closing
- Formal tone throughout""",
}

WRITING_MODE_LABELS: dict[WritingMode, str] = {
    WritingMode.GENERAL: "General",
    WritingMode.EMAIL: "Email",
    WritingMode.LINKEDIN: "LinkedIn Post",
    WritingMode.TWITTER: "Twitter/X",
    WritingMode.SLACK: "Slack",
    WritingMode.FORMAL_LETTER: "Formal Letter",
}

SYSTEM_TEMPLATE = """\
{profile}

---

You are helping the user write content in their personal voice as defined above.
{mode_context}

Important:
- Always match the user's voice profile
- Use their signature phrases and vocabulary naturally
- Never use words/phrases from their "avoid" list
- Match the appropriate formality level for the task"""


def build_system_prompt(prompt_text: str, writing_mode: WritingMode) -> str:
    return SYSTEM_TEMPLATE.format(
        profile=prompt_text,
        mode_context=WRITING_MODE_CONTEXT[writing_mode],
    )
