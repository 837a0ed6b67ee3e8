from typing import Sequence

SUMMARY_CLOSE = "</summary>"


def format_review_comment(summary: str, chunk_reviews: Sequence[str]) -> str:
    """
    Build the pull request comment body.

    With one chunk review (or none) there is nothing to collapse, so the
    summary is the body.
    Otherwise the summary becomes the header of a <details> block and the
    chunk reviews, in order, its expandable content.
    """
    if len(chunk_reviews) <= 1:
        return summary

    details = "\n".join(chunk_reviews)

    # model output sometimes drops the closing tag
    if not summary.endswith(SUMMARY_CLOSE):
        summary = summary + SUMMARY_CLOSE

    return (
        "<details>\n"
        f"<summary>{summary}\n"
        "\n"
        f"{details}\n"
        "\n"
        "</details>\n"
    )
