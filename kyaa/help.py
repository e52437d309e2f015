"""Usage text rendering."""

from kyaa.models import FlagDescriptor, FlagRegistry

USAGE_HEADER = 'usage:\n'


def format_flag(flag: FlagDescriptor) -> str:
    """Format one flag's block: the flag line, then its help text verbatim."""
    short = f'-{flag.short_char}' if flag.short_char is not None else '  '
    return f'  {short}  --{flag.long_name}\n{flag.help_text}\n'


def render_help(registry: FlagRegistry) -> str:
    """Render the usage listing for every flag in registration order."""
    return USAGE_HEADER + ''.join(format_flag(flag) for flag in registry.flags)
