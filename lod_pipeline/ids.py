from bs4 import BeautifulSoup


def assign_ids(soup: BeautifulSoup) -> BeautifulSoup:
    """
    Give paragraphs and blockquotes sequential ids, in document order.

    Paragraphs get `para-<i>` and blockquotes `quote-<i>`, each counted
    from zero. Existing ids are overwritten, so running it again after the
    structure changed renumbers the elements.
    """
    for index, para in enumerate(soup.find_all("p")):
        para["id"] = f"para-{index}"
    for index, quote in enumerate(soup.find_all("blockquote")):
        quote["id"] = f"quote-{index}"
    return soup
