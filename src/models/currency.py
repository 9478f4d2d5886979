from enum import Enum


class Currency(Enum):
    CZK = "CZK"
    EUR = "EUR"
    USD = "USD"

    @property
    def symbol(self) -> str:
        return {
            Currency.CZK: "Kč",
            Currency.EUR: "€",
            Currency.USD: "$",
        }[self]

    @property
    def display_name(self) -> str:
        return {
            Currency.CZK: "Czech Koruna",
            Currency.EUR: "Euro",
            Currency.USD: "US Dollar",
        }[self]
