# TRANSBOOK/backend/transbook/constants.py

from typing import Literal

# Statuts possibles par entité (les transitions ne sont pas contrôlées)
CustomerStatus = Literal["active", "inactive", "suspended"]
VehicleStatus = Literal["available", "in_transit", "maintenance", "inactive"]
DriverStatus = Literal["available", "on_trip", "inactive"]
TripStatus = Literal["scheduled", "in_progress", "completed", "cancelled"]
InvoiceStatus = Literal["draft", "sent", "paid", "overdue", "cancelled"]
ExpenseCategory = Literal["fuel", "maintenance", "toll", "insurance", "other"]

# Statuts utilisés par le tableau de bord
TRIP_COMPLETED = "completed"
TRIP_IN_PROGRESS = "in_progress"
INVOICE_SENT = "sent"
VEHICLE_AVAILABLE = "available"

EXPENSE_CATEGORIES = {
    "fuel": "Carburant",
    "maintenance": "Entretien",
    "toll": "Péage",
    "insurance": "Assurance",
    "other": "Autre"
}
