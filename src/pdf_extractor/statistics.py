"""
Statistics Aggregator
=====================

Per-page word and character counts with document totals.
"""

from pdf_extractor.models import DocumentStatistics, PageStatistic


def aggregate(page_texts: list[str]) -> DocumentStatistics:
    """
    Count words (whitespace tokens of the trimmed text) and raw characters.

    Args:
        page_texts: Text of each page, in page order

    Returns:
        DocumentStatistics whose totals equal the sums of the page counts
    """
    page_stats = [
        PageStatistic(
            page=index,
            words=len(text.split()) if text.strip() else 0,
            characters=len(text),
        )
        for index, text in enumerate(page_texts, start=1)
    ]
    return DocumentStatistics(
        total_words=sum(s.words for s in page_stats),
        total_characters=sum(s.characters for s in page_stats),
        page_stats=page_stats,
    )


class StatisticsAggregator:
    def aggregate(self, page_texts: list[str]) -> DocumentStatistics:
        return aggregate(page_texts)
