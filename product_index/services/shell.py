"""
==============================================================================
Interactive Shell Module
==============================================================================

Text menu for working with a SearchEngine from a terminal.

This module implements:
- ShellSession: Menu loop holding the per-session "last searched category"
- main: Console entry point seeding the default categories

Menu:
-----
    1 - List stock
    2 - Add product
    3 - Search product (1 name, 2 brand, 3 category)
    4 - Exit

After a search with results, the products of the first result's
category are listed before every menu until another search succeeds.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from product_index.catalog.engine import SearchEngine
from product_index.catalog.models import Product
from product_index.core.exceptions import AppException


# Module logger
logger = logging.getLogger(__name__)

SEPARATOR = "=" * 28


def format_product(product: Product) -> str:
    """Render one product as a single line."""
    return (
        f"ID: {product.id}, Name: {product.name}, "
        f"Brand: {product.brand}, Category: {product.category}"
    )


class ShellSession:
    """
    Interactive session over a SearchEngine.

    Input and output are injected so the loop can be driven by tests.

    Attributes:
        engine: Engine all commands run against
        last_category: Category of the first result of the last
            successful search, or None before any
    """

    def __init__(
        self,
        engine: SearchEngine,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print
    ) -> None:
        self.engine = engine
        self.last_category: Optional[str] = None
        self._input = input_fn
        self._output = output_fn

    # =========================================================================
    # RENDERING
    # =========================================================================

    def _show_products(self, products: List[Product], empty_message: str) -> None:
        if not products:
            self._output(empty_message)
            return
        for product in products:
            self._output(format_product(product))

    def show_stock(self) -> None:
        """Print every product."""
        self._output("\n==== Current Stock ====")
        self._show_products(self.engine.list_all(), "Stock is empty.")
        self._output(SEPARATOR + "\n")

    def show_category(self, category: str) -> None:
        """Print the products of one category."""
        self._output(f"\n=== Products in category '{category}' ===")
        self._show_products(
            self.engine.list_by_category(category),
            "No products found in this category."
        )
        self._output(SEPARATOR + "\n")

    def show_menu(self) -> None:
        self._output("========== Menu ==========")
        self._output("1 - List stock")
        self._output("2 - Add product")
        self._output("3 - Search product")
        self._output("4 - Exit")
        self._output("==========================")

    def _ask(self, prompt: str) -> str:
        return self._input(f"{prompt} ").strip()

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def add_product(self) -> int:
        """Prompt for the three fields and insert a product."""
        name = self._ask("Product name:")
        brand = self._ask("Product brand:")
        category = self._ask("Product category:")

        product_id = self.engine.insert(name, brand, category)
        self._output(f"Product {product_id} added.\n")
        return product_id

    def search(self) -> List[Product]:
        """
        Prompt for a field selector and term, then print the results.

        An invalid selector is reported and yields no results; it never
        changes ``last_category``.
        """
        self._output("Search by:")
        self._output("1 - Name")
        self._output("2 - Brand")
        self._output("3 - Category")
        selector = self._ask("Option number:")
        term = self._ask("Search term:")

        try:
            results = self.engine.query(term, selector)
        except AppException as e:
            self._output(f"{e.message}\n")
            return []

        self._output("\n=== Search results ===")
        self._show_products(results, "No products found.")
        self._output(SEPARATOR + "\n")

        if results:
            self.last_category = results[0].category
        return results

    # =========================================================================
    # LOOP
    # =========================================================================

    def handle(self, choice: str) -> bool:
        """
        Run one menu choice.

        Returns:
            False when the session should end
        """
        if choice == "1":
            self.show_stock()
        elif choice == "2":
            self.add_product()
        elif choice == "3":
            self.search()
        elif choice == "4":
            self._output("Exiting.")
            return False
        else:
            self._output("Invalid option. Try again.\n")
        return True

    def run(self) -> None:
        """Show the stock once, then loop over the menu until exit or EOF."""
        self.show_stock()

        while True:
            if self.last_category is not None:
                self.show_category(self.last_category)
            else:
                self._output("(Full stock shown at startup)")

            self.show_menu()

            try:
                choice = self._ask("Choose an option:")
                keep_going = self.handle(choice)
            except (EOFError, KeyboardInterrupt):
                self._output("\nExiting.")
                break

            if not keep_going:
                break


def main() -> None:
    """Console entry point: seed the default categories and start the shell."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    engine = SearchEngine()
    engine.seed()
    ShellSession(engine).run()


if __name__ == "__main__":
    main()
