SUMMARIZE_PROMPT = (
    "Can you summarize this for me?\n"
    "It would be good to stick to highlighting pressing issues and providing "
    "code suggestions to improve the pull request.\n"
    "Here's what you need to summarize:\n"
)

NO_CHANGES_PROMPT = (
    "Say that you didn't find any relevant changes to comment on any file"
)


def build_review_prompt(extra_prompt: str = "") -> str:
    """Instructions placed in front of every diff chunk of one run."""
    return (
        "This is a pull request or part of a pull request if the pull request is very large.\n"
        "Suppose you review this PR as an excellent software engineer and an excellent "
        "security engineer.\n"
        "Can you tell me the issues with differences in a pull request and provide "
        "suggestions to improve it?\n"
        "You can provide a review summary and issue comments per file if any major "
        "issues are found.\n"
        "Always include the name of the file that is citing the improvement or problem.\n"
        f"{extra_prompt}\n"
    )


def build_summary_prompt(chunk_reviews: list[str]) -> str:
    # summarizing nothing makes the model invent findings
    instruction = SUMMARIZE_PROMPT if chunk_reviews else NO_CHANGES_PROMPT
    return instruction + "\n\n" + "\n".join(chunk_reviews)
