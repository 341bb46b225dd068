"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

APP_TITLE = "Gestión de Ausencias - Liceo Industrial de Recoleta"

ISO_DATE_FORMAT = "%Y-%m-%d"

# Index 0 = January (months are zero-based across the reports).
MONTH_NAMES = (
    "Enero",
    "Febrero",
    "Marzo",
    "Abril",
    "Mayo",
    "Junio",
    "Julio",
    "Agosto",
    "Septiembre",
    "Octubre",
    "Noviembre",
    "Diciembre",
)
