#!/usr/bin/env python3
"""
Script to seed the database with placeholder dashboard data for local development.
Run with: python3 seed_database.py
"""

from datetime import date

from acme_dashboard.core.database import Base, SessionLocal, engine
from acme_dashboard.models import Customer, Invoice, Revenue

CUSTOMERS = [
    ("Evil Rabbit", "evil@rabbit.com", "/customers/evil-rabbit.png"),
    ("Delba de Oliveira", "delba@oliveira.com", "/customers/delba-de-oliveira.png"),
    ("Lee Robinson", "lee@robinson.com", "/customers/lee-robinson.png"),
    ("Michael Novotny", "michael@novotny.com", "/customers/michael-novotny.png"),
    ("Amy Burns", "amy@burns.com", "/customers/amy-burns.png"),
    ("Balazs Orban", "balazs@orban.com", "/customers/balazs-orban.png"),
]

# (customer index, amount in cents, status, date)
INVOICES = [
    (0, 15795, "pending", date(2022, 12, 6)),
    (1, 20348, "pending", date(2022, 11, 14)),
    (4, 3040, "paid", date(2022, 10, 29)),
    (3, 44800, "paid", date(2023, 9, 10)),
    (5, 34577, "pending", date(2023, 8, 5)),
    (2, 54246, "pending", date(2023, 7, 16)),
    (0, 666, "pending", date(2023, 6, 27)),
    (3, 32545, "paid", date(2023, 6, 9)),
    (4, 1250, "paid", date(2023, 6, 17)),
    (5, 8546, "paid", date(2023, 6, 7)),
    (1, 500, "paid", date(2023, 8, 19)),
    (5, 8945, "paid", date(2023, 6, 3)),
    (2, 1000, "paid", date(2022, 6, 5)),
]

REVENUE = [
    ("Jan", 2000), ("Feb", 1800), ("Mar", 2200), ("Apr", 2500),
    ("May", 2300), ("Jun", 3200), ("Jul", 3500), ("Aug", 3700),
    ("Sep", 2500), ("Oct", 2800), ("Nov", 3000), ("Dec", 4800),
]

# Create tables if they don't exist
Base.metadata.create_all(bind=engine)

db = SessionLocal()


def clear_database():
    """Clear existing data from the dashboard tables"""
    print("Clearing existing data...")
    db.query(Invoice).delete()
    db.query(Customer).delete()
    db.query(Revenue).delete()
    db.commit()
    print("Database cleared.")


def seed_customers():
    print("Seeding customers...")
    customers = [Customer(name=name, email=email, image_url=image_url) for name, email, image_url in CUSTOMERS]
    db.add_all(customers)
    db.commit()
    print(f"Seeded {len(customers)} customers.")
    return customers


def seed_invoices(customers):
    print("Seeding invoices...")
    invoices = [
        Invoice(customer_id=customers[index].id, amount=amount, status=status, date=issued)
        for index, amount, status, issued in INVOICES
    ]
    db.add_all(invoices)
    db.commit()
    print(f"Seeded {len(invoices)} invoices.")


def seed_revenue():
    print("Seeding revenue...")
    db.add_all([Revenue(month=month, revenue=revenue) for month, revenue in REVENUE])
    db.commit()
    print(f"Seeded {len(REVENUE)} revenue months.")


if __name__ == "__main__":
    try:
        clear_database()
        customers = seed_customers()
        seed_invoices(customers)
        seed_revenue()
        print("Seeding complete.")
    except Exception as e:
        db.rollback()
        print(f"Seeding failed: {e}")
        raise
    finally:
        db.close()
