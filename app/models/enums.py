from enum import Enum

class TransactionType(str, Enum):
    income = "income"
    expense = "expense"


class IncomeCategory(str, Enum):
    Salary = "Salary"
    Freelance = "Freelance"
    Business = "Business"
    Investment = "Investment"
    Gift = "Gift"
    Other = "Other"


# Compartida por gastos y automatizaciones
class ExpenseCategory(str, Enum):
    Food = "Food"
    Transport = "Transport"
    Shopping = "Shopping"
    Bills = "Bills"
    Healthcare = "Healthcare"
    Entertainment = "Entertainment"
    Education = "Education"
    Other = "Other"


class Frequency(str, Enum):
    Daily = "Daily"
    Weekly = "Weekly"
    Monthly = "Monthly"
    Yearly = "Yearly"
