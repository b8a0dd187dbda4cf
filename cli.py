# cli.py - interactive product catalog shell
import argparse
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.pyproducts import ProductClient

console = Console()
c: Optional[ProductClient] = None

status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products Catalog"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("In stock", justify="center", width=9)
    table.add_column("Description", width=30)

    for p in products:
        in_stock = p.get("inStock")
        table.add_row(
            str(p.get("id", "N/A")),
            str(p.get("name", "N/A")),
            f"{p.get('price', 0)}",
            str(p.get("category") or "-"),
            "-" if in_stock is None else ("[green]yes[/green]" if in_stock else "[red]no[/red]"),
            str(p.get("description") or ""),
        )
    console.print(table)


def show_page(envelope: Dict[str, Any]):
    title = (
        f"📦 Products - page {envelope.get('page')} "
        f"(limit {envelope.get('limit')}, total {envelope.get('total')})"
    )
    show_products(envelope.get("products", []), title=title)


def show_stats(stats: Dict[str, Any]):
    table = Table(box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Category", width=20)
    table.add_column("Products", justify="right", width=10)
    for category, count in sorted(stats.get("countByCategory", {}).items()):
        table.add_row(category, str(count))
    console.print(Panel(table, title=f"📊 {stats.get('totalProducts', 0)} products", border_style="yellow"))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after printing the error.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        detail = e
        response = getattr(e, "response", None)
        if response is not None:
            try:
                detail = response.json().get("message", e)
            except ValueError:
                pass
        status_message = f"Error: {detail}"
        console.print(show_status(status_message, False))
        return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def refresh_cache():
    global product_cache
    envelope = try_api(c.list_products) or {}
    product_cache = envelope.get("products", [])


def get_product_completer():
    if not product_cache:
        refresh_cache()
    ids = [str(p.get("id", "")) for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def get_name_completer():
    if not product_cache:
        refresh_cache()
    return WordCompleter([p.get("name", "") for p in product_cache if p.get("name")], ignore_case=True)


def get_category_completer():
    if not product_cache:
        refresh_cache()
    return WordCompleter(sorted({p["category"] for p in product_cache if p.get("category")}), ignore_case=True)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product API",
        "[bold blue]Catalog CLI with Autocomplete[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields() -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    description = Prompt.ask("📝 Description", default="")
    if description:
        fields["description"] = description
    category = prompt_with_autocomplete("🏷️ Category", completer=get_category_completer())
    if category:
        fields["category"] = category
    fields["inStock"] = Confirm.ask("In stock?", default=True)
    return fields


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, product_cache

    console.clear()
    console.print(create_header())
    refresh_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "➕ Create product"),
            ("2", "🔍 Search products", "6", "✏️ Update product"),
            ("3", "📊 Stats", "7", "🗑️ Delete product"),
            ("4", "ℹ️ Get product by ID", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            category = prompt_with_autocomplete("Category (blank for all)", completer=get_category_completer()).strip()
            page = IntPrompt.ask("Page", default=1)
            limit = IntPrompt.ask("Limit (0 for all)", default=0)
            envelope = try_api(
                c.list_products, category or None, page, limit or None,
                success_msg="Products loaded successfully",
            )
            if envelope is not None:
                if not category and page == 1 and not limit:
                    product_cache = envelope.get("products", [])
                show_page(envelope)

        elif choice == "2":
            term = prompt_with_autocomplete("Enter search term", completer=get_name_completer())
            res = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
            if res is not None:
                show_products(res)

        elif choice == "3":
            stats = try_api(c.stats, success_msg="Stats loaded")
            if stats:
                show_stats(stats)

        elif choice == "4":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "5":
            name = prompt_with_autocomplete("Enter product name")
            price = ask_float("💰 Price", default=10.0)
            fields = ask_product_fields()
            resp = try_api(c.create_product, name, price, **fields, success_msg=f"Product '{name}' created")
            if resp:
                console.print(Panel(f"Created product: [green]{resp['id']}[/green]"))
                refresh_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            current = try_api(c.get_product, pid)
            if current:
                name = prompt_with_autocomplete("Name", default=str(current.get("name", "")))
                price = ask_float("💰 Price", default=current.get("price", 10.0))
                resp = try_api(c.update_product, pid, name, price, success_msg=f"Product {pid} updated")
                if resp:
                    show_products([resp])
                    refresh_cache()

        elif choice == "7":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                resp = try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                if resp:
                    show_products(resp.get("deletedProduct", []), title="🗑️ Deleted")
                    refresh_cache()

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Interactive Product API shell")
    parser.add_argument("--base-url", default="http://localhost:3000")
    args = parser.parse_args()
    c = ProductClient(base_url=args.base_url)
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n\n[bold red]Unexpected error: {e}[/bold red]")
        sys.exit(1)
