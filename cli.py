# cli.py - interactive storefront browser
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from storefront_sdk.client import StoreClient

console = Console()
c = StoreClient()

status_message = "Ready"
brand_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def brand_name(brand_id: str) -> str:
    for b in brand_cache:
        if b.get("id") == brand_id:
            return b.get("name", brand_id)
    return brand_id


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
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name", style="bold", width=24)
    table.add_column("Brand", width=12)
    table.add_column("Description", width=40)
    table.add_column("Price", justify="right", width=10)

    for p in products:
        table.add_row(
            p.get("id", "N/A"),
            p.get("name", "N/A"),
            brand_name(p.get("categoryId", "")),
            p.get("description", ""),
            f"${p.get('price', 0):,}",
        )
    console.print(table)


def show_brands(brands: List[Dict[str, Any]]):
    if not brands:
        console.print("[italic yellow]No brands found[/italic yellow]")
        return

    table = Table(title="🏷️ Brands", box=box.ROUNDED, header_style="bold cyan", title_style="bold magenta")
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name", style="bold", width=24)
    for b in brands:
        table.add_row(b.get("id", "N/A"), b.get("name", "N/A"))
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner. Errors are reported in the
    status panel and turned into a None result.
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
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


def get_brand_completer():
    return WordCompleter([b.get("id", "") for b in brand_cache if b.get("id")], ignore_case=True)


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)
    header.add_row(
        "🛍️ Storefront",
        f"[bold blue]{c.base_url}[/bold blue]",
        f"[dim]{datetime.now().strftime('%Y-%m-%d %H:%M:%S')}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, brand_cache

    console.clear()
    console.print(create_header())
    brand_cache = try_api(c.list_brands) or []

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        for row in [
            ("1", "📦 List products", "4", "🔎 Brand products"),
            ("2", "🔍 Search products", "5", "🔑 Log in"),
            ("3", "🏷️ List brands", "6", "🛒 View cart"),
            ("", "", "q", "👋 Quit"),
        ]:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 7)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            products = try_api(c.list_products, success_msg="Products loaded")
            if products is not None:
                show_products(products)

        elif choice == "2":
            term = prompt_with_autocomplete("Text in description")
            res = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
            if res is not None:
                show_products(res, title=f"🔍 Matching '{term}'")

        elif choice == "3":
            brands = try_api(c.list_brands, success_msg="Brands loaded")
            if brands is not None:
                brand_cache = brands
                show_brands(brands)

        elif choice == "4":
            bid = prompt_with_autocomplete("Brand ID", completer=get_brand_completer())
            res = try_api(c.brand_products, bid, success_msg=f"Products for brand {bid} loaded")
            if res is not None:
                show_products(res, title=f"🏷️ {brand_name(bid)}")

        elif choice == "5":
            username = prompt_with_autocomplete("Username")
            password = Prompt.ask("Password", password=True)
            resp = try_api(c.login, username, password, success_msg=f"Logged in as {username}")
            if resp:
                console.print(Panel.fit(f"Token: [bold]{resp['token']}[/bold]", title="🔑 Session"))

        elif choice == "6":
            resp = try_api(c.view_cart, success_msg="Cart requested")
            if resp is None:
                console.print(Panel("The cart service returned nothing yet 🛍️", style="blue"))
            else:
                console.print(resp)

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
