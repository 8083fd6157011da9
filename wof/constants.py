"""Fixed enumerations shared by the record model, forms and reports."""

VEHICLE_MAKES = [
    "Toyota",
    "Honda",
    "Ford",
    "Mazda",
    "Nissan",
    "Subaru",
    "Mitsubishi",
    "Suzuki",
    "Kia",
    "Hyundai",
    "BMW",
    "Audi",
    "Mercedes-Benz",
    "Volkswagen",
    "Volvo",
    "Holden",
    "Peugeot",
    "Citroen",
    "Renault",
    "Skoda",
    "Fiat",
    "Mini",
    "Land Rover",
    "Jeep",
    "Tesla",
]

# Days between reminders once inside the pre-expiry window
REMINDER_INTERVALS = (7, 14, 21, 30)

EXPIRING_SOON_DAYS = 30
REMINDER_LEAD_MONTHS = 1

# Label -> days from today, offered next to the date picker
QUICK_PRESETS = {
    "6 months from today": 180,
    "1 year from today": 365,
}

DATE_FORMAT_HINT = "DD/MM/YYYY"
