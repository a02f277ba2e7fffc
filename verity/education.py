"""Static "How to Spot Misinformation" tips shown under the analyzer."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class EducationalItem:
    title: str
    content: str


EDUCATIONAL_CONTENT: List[EducationalItem] = [
    EducationalItem(
        title="Check the source",
        content=(
            "Look at who published the content. Is it a known news organization, an official "
            "body, or an anonymous account? Check the domain name carefully: imitation sites "
            "often swap a letter or add an unusual ending to a familiar name."
        ),
    ),
    EducationalItem(
        title="Read beyond the headline",
        content=(
            "Headlines are written to get clicks. Read the full story and check whether the "
            "body actually supports what the headline claims."
        ),
    ),
    EducationalItem(
        title="Watch for emotional language",
        content=(
            "Content designed to make you angry, scared, or outraged is more likely to be "
            "shared without thinking. Strong emotional framing is a reason to slow down."
        ),
    ),
    EducationalItem(
        title="Look for evidence and citations",
        content=(
            "Reliable reporting names its sources, links to original documents, and quotes "
            "people who can be identified. Claims with no supporting evidence deserve caution."
        ),
    ),
    EducationalItem(
        title="Cross-check with other outlets",
        content=(
            "If a major claim is true, several independent and reputable outlets will usually "
            "report it. If you can only find it in one place, be skeptical."
        ),
    ),
    EducationalItem(
        title="Check the date and context",
        content=(
            "Old stories, photos, and videos are often recirculated as if they were new. "
            "Confirm when something happened and whether it is being presented in its "
            "original context."
        ),
    ),
    EducationalItem(
        title="Be careful with links and pop-ups",
        content=(
            "Pages that push urgent downloads, ask for passwords, or bury the content under "
            "aggressive ads may be unsafe. Do not enter personal details on a site you reached "
            "from an unexpected link."
        ),
    ),
]
