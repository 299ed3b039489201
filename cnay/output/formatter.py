"""
Result formatting
"""

from ..models import ResultSet


def format_results(result_set: ResultSet, show_hostname: bool = False) -> list[str]:
    """
    Render a ResultSet as output lines.

    Sorting is plain string order on the formatted line, not numeric IP
    order, so "10.0.0.2" sorts after "10.0.0.10".

    Args:
        result_set: Deduplicated addresses
        show_hostname: Append " [hostname]" to each address

    Returns:
        Sorted list of lines
    """
    lines = []
    for entry in result_set.addresses():
        if show_hostname:
            lines.append(f"{entry.ip} [{entry.hostname}]")
        else:
            lines.append(entry.ip)

    lines.sort()
    return lines
