"""Default contractor list used when no persisted data exists yet."""

from typing import List

from contractor_registry.app.schemas.contractor import ContractorRecord

# (name, contact number, address, remarks)
_SEED_ROWS = [
    ("Farooq Ahmed", "+880 17 1128 4718", "", "Piling work Ref Eng Mostafiz, Codda"),
    ("Pintu Contactor", "+880 16 7435 1165", "Cantonment", "PCO work"),
    ("Eng Sonjoy Spectra", "+880 17 1598 8470", "Spectra", ""),
    ("Eng Hanif Ref Hasan Bashundhara", "+880 17 1478 9240", "", ""),
    ("Eng Haroon CC 90", "+880 18 1938 1120", "", ""),
    ("Shakil Rahman", "+880 17 2254 8901", "Dhanmondi", "Electrical work specialist"),
    ("Md. Karim Builder", "+880 19 1567 3421", "Uttara", "Foundation work"),
    ("Rahman Construction", "+880 16 8899 4567", "Gulshan", "Steel structure work"),
    ("Nasir Ahmed", "+880 17 5566 7788", "Mirpur", "Roofing specialist"),
    ("Elite Builders", "+880 18 9988 7766", "Banani", "Complete construction"),
    ("Sumon Contractor", "+880 17 4433 2211", "Mohammadpur", "Plumbing work"),
    ("Green Construction", "+880 19 6677 8899", "Bashundhara", "Eco-friendly construction"),
    ("Alam Builders", "+880 16 5544 3322", "Tejgaon", "Commercial buildings"),
    ("Modern Tech", "+880 17 7788 9900", "Wari", "Smart home systems"),
    ("Rapid Construction", "+880 18 1122 3344", "Ramna", "Fast completion projects"),
    ("SafeBuild Ltd", "+880 19 9900 1122", "New Market", "Safety compliance specialist"),
    ("Urban Developers", "+880 17 3344 5566", "Panthapath", "Urban planning projects"),
    ("Quality Works", "+880 16 7766 5544", "Lalmatia", "Quality assurance"),
    ("Pro Builders", "+880 18 2233 4455", "Farmgate", "Professional construction"),
    ("Innovative Construct", "+880 19 5566 7788", "Shantinagar", "Innovative building solutions"),
    ("Reliable Contractors", "+880 17 8899 0011", "Malibagh", "Reliable service provider"),
    ("Express Builders", "+880 16 1122 3344", "Segunbagicha", "Express delivery projects"),
    ("Smart Solutions", "+880 18 4455 6677", "Eskaton", "Technology integrated construction"),
    ("Premier Construction", "+880 19 7788 9900", "Bailey Road", "Premium quality work"),
]


def seed_contractors() -> List[ContractorRecord]:
    """Return a fresh copy of the seed dataset (ids and serials 1..24)."""
    return [
        ContractorRecord(
            id=index,
            serial=index,
            name=name,
            contact_number=contact,
            address=address,
            remarks=remarks,
        )
        for index, (name, contact, address, remarks) in enumerate(_SEED_ROWS, start=1)
    ]
