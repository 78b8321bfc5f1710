"""
Fixed reference tables used to fabricate accounts and transactions.

Everything generated by the fallback content provider is drawn
from these tables, so tests can check membership.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Bank:
    name: str
    code: str
    ifsc_prefix: str


BANKS: list[Bank] = [
    Bank("State Bank of India", "SBI", "SBIN"),
    Bank("HDFC Bank", "HDFC", "HDFC"),
    Bank("ICICI Bank", "ICICI", "ICIC"),
    Bank("Punjab National Bank", "PNB", "PUNB"),
    Bank("Bank of Baroda", "BOB", "BARB"),
    Bank("Canara Bank", "CNB", "CNRB"),
    Bank("Union Bank of India", "UBI", "UBIN"),
    Bank("Bank of India", "BOI", "BKID"),
    Bank("Indian Bank", "IB", "IDIB"),
    Bank("Central Bank of India", "CBI", "CBIN"),
    Bank("Axis Bank", "AXIS", "UTIB"),
    Bank("Kotak Mahindra Bank", "KMB", "KKBK"),
    Bank("IndusInd Bank", "IIB", "INDB"),
    Bank("Yes Bank", "YES", "YESB"),
    Bank("IDFC FIRST Bank", "IDFC", "IDFB"),
]

# Three-letter city codes used in branch and IFSC codes
BRANCH_CITIES: list[str] = [
    "MUM", "DEL", "BLR", "HYD", "CHN", "KOL", "PUN", "AHM", "SUR", "VIS",
    "KAN", "NAG", "IND", "THA", "BHO", "COI", "LUD", "AGR", "MER", "RJK",
    "JAI", "JOD", "KOT", "AMD", "VAD", "RJT", "BHV", "UJN", "GWL", "JAB",
]

TRANSACTION_CATEGORIES: list[str] = [
    "Food & Dining", "Groceries", "Transportation", "Bills & Utilities",
    "Entertainment", "Healthcare", "Travel", "Education", "Shopping",
    "Fuel & Gas", "Mobile Recharge", "DTH/Cable", "Insurance Premium",
    "Mutual Fund SIP", "Fixed Deposit", "Gold Purchase", "Online Shopping",
    "UPI Payment", "NEFT Transfer", "Salary Credit", "Bonus", "Dividend",
    "Interest Credit", "Cash Withdrawal", "Loan EMI", "Credit Card Payment",
    "Investment", "Donation", "Medical", "Pharmacy",
]

# Category used when a transaction is created without one
DEFAULT_CATEGORY = "Other"

FIRST_NAMES: list[str] = [
    "Rahul", "Priya", "Amit", "Sneha", "Rajesh", "Kavya", "Suresh", "Meera",
    "Vikram", "Anita", "Arjun", "Divya", "Karan", "Pooja", "Ravi", "Nisha",
    "Arun", "Shreya", "Manoj", "Rekha", "Deepak", "Sunita", "Rohit", "Asha",
]

LAST_NAMES: list[str] = [
    "Sharma", "Patel", "Singh", "Kumar", "Gupta", "Agarwal", "Mehta", "Shah",
    "Verma", "Jain", "Bansal", "Sinha", "Malhotra", "Chopra", "Kapoor", "Joshi",
    "Reddy", "Rao", "Nair", "Iyer", "Menon", "Pillai", "Das", "Bose",
]

CITIES: list[str] = [
    "Mumbai", "Delhi", "Bangalore", "Hyderabad", "Chennai", "Kolkata", "Pune",
    "Ahmedabad", "Surat", "Jaipur", "Lucknow", "Kanpur", "Nagpur", "Indore",
]

STATES: list[str] = [
    "Maharashtra", "Delhi", "Karnataka", "Telangana", "Tamil Nadu",
    "West Bengal", "Gujarat", "Rajasthan", "Uttar Pradesh", "Madhya Pradesh",
]

MERCHANT_DESCRIPTIONS: dict[str, list[str]] = {
    "Food & Dining": [
        "Dominos Pizza", "McDonalds India", "Zomato Order",
        "Swiggy Delivery", "Haldiram's", "CCD",
    ],
    "Groceries": [
        "DMart", "Big Bazaar", "Reliance Fresh", "Spencer's",
        "More Supermarket", "Nature's Basket",
    ],
    "Transportation": [
        "Ola Cab", "Uber India", "BEST Bus Pass", "Metro Card",
        "IRCTC Booking", "Rapido Bike",
    ],
    "Bills & Utilities": [
        "Airtel Mobile", "Jio Recharge", "MSEB Bill", "BSES Electricity",
        "Mahanagar Gas", "VI Recharge",
    ],
    "Mobile Recharge": [
        "Airtel Recharge", "Jio Top Up", "VI Mobile", "BSNL Recharge",
        "Idea Payment",
    ],
    "Entertainment": [
        "BookMyShow", "Netflix India", "Amazon Prime", "Hotstar", "Zee5",
        "SonyLIV",
    ],
    "Shopping": [
        "Amazon India", "Flipkart", "Myntra", "Ajio", "Nykaa", "Snapdeal",
    ],
    "Healthcare": [
        "Apollo Pharmacy", "Medplus", "1mg Order", "Practo Consult",
        "PharmEasy",
    ],
    "Fuel & Gas": [
        "Indian Oil Petrol", "HP Gas", "Bharat Petroleum", "Shell India",
        "Indane Gas",
    ],
}

GENERIC_DESCRIPTIONS: list[str] = ["General Payment", "Service Payment"]


def descriptions_for(category: str) -> list[str]:
    """Merchant strings the fallback provider may use for a category."""
    return MERCHANT_DESCRIPTIONS.get(category, GENERIC_DESCRIPTIONS)
