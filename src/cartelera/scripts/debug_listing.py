"""Debug script to inspect a Cineteca listing page when the markup changes."""

import argparse
import asyncio
from collections import Counter
from datetime import date

from cartelera.scrapers.cineteca import CINETECA_VENUES
from cartelera.scrapers.document import parse_document
from cartelera.scrapers.extractor import TIME_ELEMENT_SELECTOR, extract_movies, is_time_token
from cartelera.scrapers.fetcher import build_listing_url, fetch_listing
from cartelera.scrapers.locator import (
    CONTAINER_SELECTORS,
    FALLBACK_COLUMN_SELECTOR,
    TITLE_SELECTOR,
    locate_containers,
)


async def debug_listing(venue_id: str, day: str, save: bool) -> None:
    """Fetch one listing page and report what each selector finds."""
    url = build_listing_url(venue_id, day)
    print(f"Fetching: {url}")
    html = await fetch_listing(url)

    if save:
        filename = f"cartelera_{venue_id}_{day}.html"
        with open(filename, "w", encoding="utf-8") as f:
            f.write(html)
        print(f"✓ HTML saved to {filename} ({len(html)} bytes)")

    tree = parse_document(html)

    print("\n" + "=" * 50)
    print("ANALYZING STRUCTURE")
    print("=" * 50)

    print("\n1. Container selectors:")
    for selector in CONTAINER_SELECTORS:
        print(f"  - {selector}: {len(tree.select_all(selector))}")

    columns = tree.select_all(FALLBACK_COLUMN_SELECTOR)
    with_title = [c for c in columns if c.first_match(TITLE_SELECTOR)]
    print(f"\n2. {FALLBACK_COLUMN_SELECTOR} columns: {len(columns)} ({len(with_title)} with a title marker)")

    titles = tree.select_all(TITLE_SELECTOR)
    print(f"\n3. Title markers: {len(titles)}")
    for title in titles[:10]:
        print(f"  - {title.text().strip()[:60]}")

    time_elements = [e for e in tree.select_all(TIME_ELEMENT_SELECTOR) if is_time_token(e.text().strip())]
    print(f"\n4. Time elements (anchors and badges): {len(time_elements)}")
    for element in time_elements[:10]:
        print(f"  - <{element.tag_name}> {element.text().strip()} → {element.attribute('href', '#')[:80]}")

    print("\n5. Common div classes:")
    class_counts: Counter[str] = Counter()
    for div in tree.select_all("div[class]"):
        class_counts.update(div.attribute("class").split())
    for cls, count in class_counts.most_common(20):
        if count > 2:
            print(f"  - .{cls}: {count}")

    containers = locate_containers(tree)
    venue_name = next((v.name for v in CINETECA_VENUES if v.id == venue_id), venue_id)
    movies = extract_movies(containers, venue_name)
    print(f"\n6. Pipeline: {len(containers)} containers → {len(movies)} movies")
    for movie in movies[:10]:
        print(f"  - {movie.title} [{movie.room or 'no room'}] {', '.join(movie.showtimes)}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect a Cineteca listing page.")
    parser.add_argument(
        "--venue",
        default=CINETECA_VENUES[0].id,
        choices=[v.id for v in CINETECA_VENUES],
        help="Venue cinemaId (default: %(default)s)",
    )
    parser.add_argument(
        "--date",
        type=lambda value: date.fromisoformat(value).isoformat(),
        default=date.today().isoformat(),
        metavar="YYYY-MM-DD",
        help="Listing day (default: today)",
    )
    parser.add_argument("--save", action="store_true", help="Save the fetched HTML to a file")
    args = parser.parse_args()

    asyncio.run(debug_listing(args.venue, args.date, args.save))


if __name__ == "__main__":
    main()
