"""Response rendering for spelling corrections.

Builds the corrected URI for a redirect and the HTML variant list that a
"300 Multiple Choices" response carries as its body.
"""

from html import escape
from typing import List, Optional, Sequence

from urlspell.models import Candidate, Similarity

# Note key the host reads the variant list from
VARIANT_LIST_NOTE = "variant-list"

_RELATED_SEPARATOR = (
    "</ul>\nFurthermore, the following related documents were found:\n<ul>\n"
)


def build_redirect_uri(parent_url: str, name: str, path_info: str = "") -> str:
    """Join the parent URL, the corrected name and any trailing path info.

    Args:
        parent_url: The request URI up to and including the last '/' before
            the misspelled component.
        name: The corrected directory entry name.
        path_info: Path info that followed the misspelled component.

    Returns:
        The corrected request path.

    Example:
        >>> build_redirect_uri("/doc/", "index.html", "/more")
        '/doc/index.html/more'
    """
    return parent_url + name + path_info


def render_variant_list(
    uri: str,
    candidates: Sequence[Candidate],
    referer: Optional[str] = None,
) -> str:
    """Render the HTML fragment listing the candidate documents.

    Candidates must already be ranked best first. When close matches are
    followed by basename-only matches a separator is written between them,
    suggesting the reader look closely at the latter. The separator is only
    written after a close match that is neither the first nor the last
    entry of the list.

    The URI, the names and the referer are HTML-escaped, since all three come
    from the client or the filesystem.

    Args:
        uri: The request URI as the client sent it.
        candidates: Ranked candidates.
        referer: The inbound Referer header, if any.

    Returns:
        The HTML fragment.
    """
    parts: List[str] = [
        "The document name you requested (<code>",
        escape(uri),
        "</code>) could not be found on this server.\n"
        "However, we found documents with names similar to the one you requested.<p>"
        "Available documents:\n<ul>\n",
    ]

    last = len(candidates) - 1
    for i, candidate in enumerate(candidates):
        name = escape(candidate.name)
        parts.append(
            f'<li><a href="{name}">{name}</a> '
            f"({candidate.similarity.phrase})\n"
        )

        if (
            0 < i < last
            and candidate.similarity is not Similarity.VERY_DIFFERENT
            and candidates[i + 1].similarity is Similarity.VERY_DIFFERENT
        ):
            parts.append(_RELATED_SEPARATOR)

    parts.append("</ul>\n")

    if referer is not None:
        parts.append(
            f'Please consider informing the owner of the <a href="{escape(referer)}">'
            "referring page</a> about the broken link.\n"
        )

    return "".join(parts)
