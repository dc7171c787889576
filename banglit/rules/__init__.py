"""Rule table loading and inversion."""

from banglit.rules.reverse import build_reverse, get_reverse_table
from banglit.rules.table import get_rule_table, load_rule_table


__all__ = ['build_reverse', 'get_reverse_table', 'get_rule_table', 'load_rule_table']
