"""Prompts for turning a video transcript into a how-to guide."""

HOWTO_SYSTEM_PROMPT = (
    "You are an expert technical writer and educator. Your task is to transform "
    "a noisy, chronological YouTube transcript into a clear, well-structured, "
    "step-by-step how-to guide. The output must be directly usable as "
    "documentation, not a summary."
)

HOWTO_USER_PROMPT = '''I will give you:
- The title of a YouTube video.
- An optional description.
- The full transcript (possibly messy, with filler words, tangents, and repetition).

Your job:
1. Identify the main task or goal taught in the video.
2. Write a detailed how-to document that a reasonably technical reader can follow without watching the video.
3. Organize the content into sections with headings and numbered steps.
4. Convert conversational language into concise, instructional prose.
5. Remove filler, repeated information, and irrelevant tangents; keep only what is needed to perform the task.
6. Include prerequisites, tools/software needed, and any important configuration values.
7. Include troubleshooting tips or common mistakes if the transcript implies them.
8. Where the video uses vague references like "click here" or "do this", infer and name the actual UI element or action when possible.
9. Use Markdown-style structure (headings, bullet points, numbered lists, code blocks) so it maps cleanly to Notion blocks.

## FORMATTING RULES:
- Headings: "# ", "## " or "### " at the start of a line. No styling inside headings.
- Bullets: "- " at the start of a line. Numbered steps: "1. ", "2. ", ...
- Quotes: "> " at the start of a line.
- Inline styles: **bold**, *italic*, `code`. Never nest them.
- Code: fenced with ``` on its own line, optionally followed by the language.
- No tables, links, images or HTML.

Output format (Markdown-like, but do NOT include the word "Markdown" or any surrounding commentary):

# <Clear how-to title>

## Overview
- One or two sentences explaining what the guide helps the reader accomplish.
- A short bullet list of key outcomes.

## Prerequisites
- List tools, accounts, APIs, and permissions required.

## Steps
1. Step title
- Sub-steps as bullet points.
- Include specific button/menu names, commands, and parameter names where available.
2. Next step
- Continue until the task is fully covered.

## Notes and tips
- Clarifications, best practices, and optional enhancements.

## Troubleshooting
- Common issues mentioned or implied in the video and how to resolve them.

Here is the input:

- Video title: {video_title}
- Video description: {video_description}

--- BEGIN TRANSCRIPT ---
{transcript}
--- END TRANSCRIPT ---
'''


def get_system_prompt() -> str:
    """Get the system prompt for how-to generation."""
    return HOWTO_SYSTEM_PROMPT


def build_user_prompt(
    transcript: str,
    video_title: str,
    video_description: str = "",
) -> str:
    """Fill the user prompt template with the video details.

    Args:
        transcript: Full transcript text
        video_title: Title of the video
        video_description: Optional video description

    Returns:
        The user message to send to the model
    """
    return HOWTO_USER_PROMPT.format(
        transcript=transcript,
        video_title=video_title,
        video_description=video_description,
    )
