#! /usr/bin/env python
import click

from . import var


def pagination_options(fn):
    options = [
        click.option("-t", "--total", help="Total number of items", type=int, default=0),
        click.option("-p", "--page", help="Current page (default {})".format(var.DEFAULT_CURRENT), type=int, default=var.DEFAULT_CURRENT),
        click.option("-s", "--page-size", help="Items per page (default {})".format(var.DEFAULT_PAGE_SIZE), type=int, default=var.DEFAULT_PAGE_SIZE),
        click.option("--less-items/--more-items", help="Show fewer pages around the current page (default --more-items)", default=False),
        click.option("--jumpers/--no-jumpers", help="Show jump markers over collapsed pages (default --jumpers)", default=True),
        click.option("--quick-jumper", is_flag=True, help="Show the quick jump field"),
        click.option("--size-changer/--no-size-changer", help="Show the page size (default: when total > {})".format(var.TOTAL_BOUNDARY_SHOW_SIZE_CHANGER), default=None),
        click.option("--simple", is_flag=True, help="Simple mode, show only current/total"),
        click.option("--locale", "locale_", type=click.Choice(["en_US", "zh_CN"]), help="Label language (default en_US)", default="en_US"),
    ]
    for option in reversed(options):
        fn = option(fn)
    return fn


def build_config(total, page, page_size, less_items, jumpers, quick_jumper, size_changer, simple):
    from .pagination import PaginationConfig
    return PaginationConfig(
        total=total,
        default_current=page,
        default_page_size=page_size,
        show_less_items=less_items,
        show_prev_next_jumpers=jumpers,
        show_quick_jumper=quick_jumper,
        show_size_changer=size_changer,
        simple=simple,
    )


@click.group()
def cli():
    pass


@click.command("help")
@click.argument("command", type=str)
def help(command):
    from .help import help_strings
    if command in help_strings:
        click.echo(help_strings[command])
    else:
        click.echo("Did not find help text for command '{}'".format(command))


@click.command("show", help="Print the page bar for a paginated list.")
@pagination_options
@click.option("--show-total", is_flag=True, help="Prefix the range of items shown")
def show(total, page, page_size, less_items, jumpers, quick_jumper, size_changer, simple, locale_, show_total):
    from .locales import LOCALES
    from .pagination import Pagination
    from .render import render_text

    pagination = Pagination(
        build_config(total, page, page_size, less_items, jumpers, quick_jumper, size_changer, simple)
    )

    def total_text(total, item_range):
        return "{}-{} of {}".format(item_range[0], item_range[1], total)

    click.echo(render_text(
        pagination.view(),
        locale=LOCALES[locale_],
        show_total=total_text if show_total else None,
    ))


@click.command("open", help="Page through a list interactively in the terminal.")
@pagination_options
@click.option("--debug", is_flag=True, help="Show debug messages (default False)")
def open_(total, page, page_size, less_items, jumpers, quick_jumper, size_changer, simple, locale_, debug):
    from .gui import main
    from .locales import LOCALES
    main(
        build_config(total, page, page_size, less_items, jumpers, quick_jumper, size_changer, simple),
        locale=LOCALES[locale_],
        debug=debug,
    )


cli.add_command(help)
cli.add_command(show)
cli.add_command(open_)


if __name__ == "__main__":
    cli()
