"""CLI output utilities and formatting."""

from colorama import Fore, Style

BANNER = f"""
{Fore.CYAN}{Style.BRIGHT}minivcs{Style.RESET_ALL} {Fore.WHITE}- a minimal content-addressable version control system{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def _paint(text: str, colour: str, use_color: bool) -> str:
    return f"{colour}{text}{Style.RESET_ALL}" if use_color else text


def segment_lines(text: str) -> list:
    """Split segment text into display lines; a blank line stays as ''."""
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return lines


def format_summary(tree_diff, color: bool = True) -> str:
    """Format the '+added -deleted ~modified' summary line."""
    counts = tree_diff.summary()
    line = f"summary: +{counts['added']} -{counts['deleted']} ~{counts['modified']}"
    return _paint(line, Style.DIM, color)


def format_commit_diff(commit_diff, color: bool = True) -> str:
    """
    Format a CommitDiff for the terminal.

    Added paths are prefixed with '+', deleted with '-', modified with '~'
    followed by their added and removed lines.

    Args:
        commit_diff: CommitDiff to render
        color: Whether to use color output

    Returns:
        Formatted diff string
    """
    tree = commit_diff.tree
    file_diffs = {fd.path: fd for fd in commit_diff.files}
    output = []

    for path in tree.sorted_added():
        output.append(_paint(f"+ {path}", Fore.GREEN, color))

    for path in tree.sorted_modified():
        output.append(_paint(f"~ {path}", Fore.YELLOW, color))
        file_diff = file_diffs[path]
        if not file_diff.has_changes:
            # Bytes differ but decode to the same text
            output.append(_paint("  (no textual change)", Style.DIM, color))
            continue
        for segment in file_diff.segments:
            if segment.added:
                prefix, colour = '+', Fore.GREEN
            elif segment.removed:
                prefix, colour = '-', Fore.RED
            else:
                continue
            for line in segment_lines(segment.text):
                text = f"  {prefix} {line}" if line else f"  {prefix}"
                output.append(_paint(text, colour, color))

    for path in tree.sorted_deleted():
        output.append(_paint(f"- {path}", Fore.RED, color))

    output.append('')
    output.append(format_summary(tree, color))
    return '\n'.join(output)


def format_tree_change(change, color: bool = True) -> str:
    """
    Format a TreeChange: file lists before and after plus change markers.

    Args:
        change: TreeChange to render
        color: Whether to use color output
    """
    output = [_paint(f"== File structure @ {change.commit.hash} ==", Fore.MAGENTA, color)]

    output.append(_paint("Before (parent):", Style.DIM, color))
    for path in change.before or ['<empty>']:
        output.append(_paint(f"  {path}", Style.DIM, color))

    output.append('')
    output.append(_paint("After (commit):", Style.DIM, color))
    for path in change.after or ['<empty>']:
        output.append(_paint(f"  {path}", Style.DIM, color))

    output.append('')
    output.append(_paint("Changes:", Fore.CYAN, color))
    for path in change.diff.sorted_added():
        output.append(_paint(f"+ {path}", Fore.GREEN, color))
    for path in change.diff.sorted_modified():
        output.append(_paint(f"~ {path}", Fore.YELLOW, color))
    for path in change.diff.sorted_deleted():
        output.append(_paint(f"- {path}", Fore.RED, color))

    return '\n'.join(output)
