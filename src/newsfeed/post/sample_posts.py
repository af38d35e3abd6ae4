"""Sample posts for seeding."""

from .models import PostCreate

__all__ = ["generate_sample_posts"]


_TITLES = (
    "Breaking News: Major Tech Breakthrough Announced",
    "Local Community Celebrates Annual Festival",
    "New Study Reveals Surprising Health Benefits",
    "Global Economic Trends Point to Recovery",
    "Environmental Initiative Gains International Support",
    "Sports Team Clinches Championship in Dramatic Fashion",
    "Education Reform Bill Passes After Long Debate",
    "Cultural Event Draws Record Attendance",
    "Scientific Discovery Changes Understanding of Universe",
    "Political Leaders Announce Historic Agreement",
)

_CONTENTS = (
    "Researchers have announced a breakthrough in quantum computing that could "
    "change how data is processed. The team demonstrated a clear advantage on "
    "problems that would take conventional machines thousands of years.",
    "The annual harvest festival brought thousands of residents together this "
    "weekend for local food, artisan crafts and live music. Now in its 25th "
    "year, the celebration is a fixture of the region's calendar.",
    "A ten-year study indicates that moderate daily exercise significantly "
    "lowers the risk of cognitive decline in older adults. Even light activity "
    "showed measurable benefits.",
    "Economists point to falling unemployment, rising consumer spending and "
    "stable markets as signs that a strong recovery is underway.",
    "Forty-five countries have committed to halving carbon emissions before "
    "2030, the most ambitious joint climate pledge to date.",
    "In a final that went to double overtime, the hometown team won its first "
    "championship in fifteen years, capping a season few analysts predicted.",
    "After months of negotiation, legislators passed an education bill that "
    "raises teacher salaries, shrinks class sizes and expands early childhood "
    "programs.",
    "The international film festival closed with record attendance as more "
    "than 150,000 visitors watched premieres from 35 countries.",
    "Astronomers found evidence of water vapor in the atmosphere of an "
    "exoplanet forty light years away, a new lead in the search for "
    "habitable worlds.",
    "Representatives of long divided nations signed a peace accord covering "
    "trade, cultural exchange and joint environmental protection.",
)


def generate_sample_posts(count: int) -> list[PostCreate]:
    """Generate ``count`` sample posts with distinct titles.

    Titles and bodies cycle through a fixed set of articles. From the second
    cycle on, each title gets a ``Part N`` suffix and each body a closing
    paragraph naming the part.

    Args:
        count: Number of posts to generate.

    Returns:
        Posts ready to be inserted.
    """
    posts: list[PostCreate] = []
    for i in range(count):
        part = i // len(_TITLES) + 1
        title = _TITLES[i % len(_TITLES)]
        content = _CONTENTS[i % len(_CONTENTS)]
        if part > 1:
            title = f"{title} - Part {part}"
            content = (
                f"{content}\n\nThis is additional information for part {part} "
                "of this series."
            )
        posts.append(PostCreate(title=title, content=content))
    return posts
