# synthetic customer table
"""
Synthetic customer list generation
- Customer table schema (ID, name, YTD purchases)
- Utilities to generate and export the semicolon-delimited CSV
"""
import csv
import random
from typing import Dict, List, Optional

# ----- Configuration -----
NUM_CUSTOMERS = 40
OUTPUT_DIR = "./synthetic_data"
FIELDNAMES = ["Customer ID", "Customer Name", "YTD Purchases"]

# ----- Sample Templates -----
PREFIXES = ["Medi", "Fin", "Solar", "Agro", "Artis", "Nordic", "Urban", "Blue"]
STEMS = ["Core", "Sure", "Edge", "Growth", "Print", "Wave", "Field", "Line"]
SUFFIXES = ["Clinics", "Partners", "Europe", "BV", "Design", "Logistics", "Holdings", "GmbH"]


# ----- Utility Functions -----
def random_ytd(rng: random.Random) -> float:
    return round(rng.uniform(1_000.0, 250_000.0), 2)


def generate_customers(n: int = NUM_CUSTOMERS, seed: Optional[int] = None) -> List[Dict[str, str]]:
    """Generate synthetic customer rows with unique names."""
    rng = random.Random(seed)
    n = min(n, len(PREFIXES) * len(STEMS) * len(SUFFIXES))
    names = set()
    customers = []
    while len(customers) < n:
        name = f"{rng.choice(PREFIXES)}{rng.choice(STEMS)} {rng.choice(SUFFIXES)}"
        if name in names:
            continue
        names.add(name)
        customers.append({
            "Customer ID": f"C{1000 + len(customers)}",
            "Customer Name": name,
            "YTD Purchases": f"{random_ytd(rng):.2f}",
        })
    return customers


def save_customer_csv(customers, filename=f"{OUTPUT_DIR}/customers.csv"):
    """Save the customer table to a semicolon-delimited CSV."""
    with open(filename, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES, delimiter=";")
        writer.writeheader()
        writer.writerows(customers)


# ----- Main Execution -----
if __name__ == "__main__":
    import os

    os.makedirs(OUTPUT_DIR, exist_ok=True)
    customers = generate_customers(seed=42)
    save_customer_csv(customers)
    print(f"Generated {len(customers)} customers in {OUTPUT_DIR}")
