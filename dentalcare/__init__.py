"""DentalCare booking API."""
