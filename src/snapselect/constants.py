from __future__ import annotations

# =============================================================================
# TAGS / ATTRIBUTES
# =============================================================================
SELECT_TAG = "select"
OPTION_TAG = "option"

ATTR_MULTIPLE = "multiple"
ATTR_DISABLED = "disabled"
ATTR_VALUE = "value"

# Seletor CSS padrão para as opções filhas de um <select>
OPTION_SELECTOR = "option"

# =============================================================================
# TIMEOUTS (milissegundos)
# =============================================================================
TIMEOUT_ELEMENT_FAST = 5_000           # 5s - elementos rápidos
TIMEOUT_ELEMENT_DEFAULT = 10_000       # 10s - elementos normais
TIMEOUT_ELEMENT_SLOW = 15_000          # 15s - elementos lentos

# =============================================================================
# MENSAGENS
# Substrings checked by existing suites; keep wording stable.
# =============================================================================
MSG_NOT_A_SELECT = "Select only works on <select> elements"
MSG_DISABLED_OPTION = "You may not select a disabled option"
MSG_DISABLED_SELECT = (
    f"{MSG_DISABLED_OPTION}: the <select> element is disabled and may not be used"
)
MSG_SINGLE_DESELECT = "You may not deselect options on a single-select control"
MSG_NOTHING_SELECTED = "No options are selected"
