"""Help strings
"""

help_show = """'pagectl show'

See 'pagectl show --help' for command line arguments

Print the page bar for a list of TOTAL items in the terminal

  < 1 ••• 23 24 [25] 26 27 ••• 50 > 10 / page

  [n]    the current page
  (n)    a disabled item
  •••    jump back or forward 5 pages (3 with --less-items)
"""

help_open = """'pagectl open'

See 'pagectl open --help' for command line arguments

Page through a list interactively in the terminal

Keyboard controls (all prompts can be left blank and will silently reject invalid values)

  Close the program                 [q]
  Previous / next page              [left|right] or [h|l]
  Jump back / forward               [H|L]
  Prompt to jump to page            [p|g]
  Prompt to set page size (int)     [s]
  Show key help                     [?]
"""


help_strings = {
    "show": help_show,
    "open": help_open,
}
