"""
Interactive console shell for the wine collection.

Reads raw field text, hands it to the validation pipeline, and renders the
collection. No business rules live here.
"""

from datetime import date
from typing import Callable, Optional, TextIO, TypeVar

import pandas as pd
from rich import box
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from cellarbook.collection import WineCollection, has_rating, is_unrated
from cellarbook.constants import Messages, UIConstants, WineType
from cellarbook.error_handling import WineValidationError
from cellarbook.schema import WineRecord
from cellarbook.utils import logger
from cellarbook.validation import parse_rating, parse_wine_type, parse_year, validate_and_build

T = TypeVar('T')

_TYPE_CHOICES = ", ".join(WineType.names())

FIELD_PROMPTS = {
    'name': UIConstants.PROMPT_NAME,
    'type': UIConstants.PROMPT_TYPE.format(choices=_TYPE_CHOICES),
    'year': UIConstants.PROMPT_YEAR,
    'country': UIConstants.PROMPT_COUNTRY,
    'rating': UIConstants.PROMPT_RATING,
    'comments': UIConstants.PROMPT_COMMENTS,
}


class RawPrompt(Prompt):
    """Prompt that returns the line as typed, without trimming whitespace."""

    def process_response(self, value: str) -> str:
        return value.rstrip("\r\n")


class WineShell:
    """
    Console front end: prompts for wines, then lists them.

    Args:
        collection: Store to add wines to (a new one by default)
        console: rich Console used for all output
        stream: Input stream for prompts (stdin when None)
        today: Fixed reference date for validation and rendering
    """

    def __init__(
        self,
        collection: Optional[WineCollection] = None,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        today: Optional[date] = None
    ):
        self.collection = collection if collection is not None else WineCollection()
        self.console = console or Console()
        self.stream = stream
        self.today = today

    # =======================
    # OUTPUT HELPERS
    # =======================

    def print_header(self):
        self.console.print(UIConstants.HEADER, style="bold", markup=False)

    def print_separator(self):
        self.console.print(UIConstants.SEPARATOR, markup=False)

    def _print_error(self, message: str):
        self.console.print(message, style="red", markup=False, highlight=False)

    def _print_wine(self, wine: WineRecord, show_vintage: bool = True):
        text = wine.render(today=self.today, show_vintage=show_vintage)
        self.console.print(text, markup=False, highlight=False)
        self.console.print()

    def display_wine_details(self, wine: WineRecord):
        """Detail block between separators; premium wines get the premium title."""
        title = UIConstants.PREMIUM_DETAILS if wine.is_premium else UIConstants.STANDARD_DETAILS
        self.print_separator()
        self.console.print(title, style=UIConstants.TYPE_STYLES[wine.type], markup=False)
        self._print_wine(wine)
        self.print_separator()

    # =======================
    # INPUT
    # =======================

    def _ask(self, field_name: str) -> str:
        return RawPrompt.ask(
            FIELD_PROMPTS[field_name],
            console=self.console,
            stream=self.stream,
            default="",
            show_default=False
        )

    def _ask_until_valid(self, field_name: str, parser: Callable[[str], T]) -> T:
        """Re-prompt one field until parser accepts it."""
        while True:
            text = self._ask(field_name)
            try:
                return parser(text)
            except WineValidationError as e:
                self._print_error(e.message)

    def prompt_and_add_wine(self) -> WineRecord:
        """
        Collect one wine field by field and add it to the collection.

        Type and year are re-prompted until valid. An unparseable rating is
        reported and skipped.
        """
        raw = {'name': self._ask('name')}
        raw['type'] = self._ask_until_valid('type', parse_wine_type).name
        raw['year'] = str(self._ask_until_valid('year', lambda text: parse_year(text, self.today)))
        raw['country'] = self._ask('country')

        rating_text = self._ask('rating')
        warnings = []
        raw['rating'] = rating_text if parse_rating(rating_text, warnings) is not None else None
        for warning in warnings:
            self._print_error(warning)

        raw['comments'] = self._ask('comments')

        # Re-prompt whatever the full build still rejects
        while True:
            result = validate_and_build(raw, today=self.today)
            if result.ok:
                break
            if result.error.field not in FIELD_PROMPTS:
                raise result.error
            self._print_error(result.error.message)
            raw[result.error.field] = self._ask(result.error.field)

        self.collection.add(result.record)
        self.console.print(Messages.WINE_ADDED, style="green", markup=False)
        logger.debug(f"Shell added {result.record.name}")
        return result.record

    def wants_another(self) -> bool:
        answer = Prompt.ask(
            UIConstants.PROMPT_CONTINUE,
            console=self.console,
            stream=self.stream,
            default="",
            show_default=False
        )
        return answer.strip().lower() in UIConstants.CONTINUE_ANSWERS

    # =======================
    # LISTING
    # =======================

    def build_summary_table(self) -> Table:
        """One-row-per-wine table from the collection's dataframe view."""
        df = self.collection.to_dataframe()

        table = Table(
            title="🍷 Wine Collection",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan",
            title_style="bold white"
        )
        table.add_column("Name", style="bold white")
        table.add_column("Type", justify="center")
        table.add_column("Year", justify="right")
        table.add_column("Country")
        table.add_column("Rating", justify="right")
        table.add_column("Vintage", style="dim white")

        for _, row in df.iterrows():
            rating = row['rating']
            vintage = row['vintage_label']
            style = UIConstants.TYPE_STYLES[WineType[row['type']]]
            table.add_row(
                Text(str(row['name'])),
                f"[{style}]{row['type']}[/{style}]",
                str(row['year']),
                Text(str(row['country'])),
                str(rating) if pd.notna(rating) else UIConstants.NOT_AVAILABLE,
                Text(str(vintage) if pd.notna(vintage) else "")
            )

        return table

    def display_all_wines(self, show_table: bool = False):
        """
        Rated wines first as detail blocks, then unrated wines as plain
        renderings without the vintage line, both in insertion order.
        """
        self.print_header()
        self.console.print()
        self.console.print(UIConstants.LIST_TITLE, markup=False)

        for wine in self.collection.filter(has_rating):
            self.display_wine_details(wine)

        for wine in self.collection.filter(is_unrated):
            self._print_wine(wine, show_vintage=False)

        self.print_separator()

        if show_table:
            self.console.print(self.build_summary_table())

    def run(self, show_table: bool = False):
        """Add wines until the user declines, then list them."""
        self.print_header()
        while True:
            self.prompt_and_add_wine()
            if not self.wants_another():
                break
        self.display_all_wines(show_table=show_table)
