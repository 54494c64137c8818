from __future__ import annotations

from django.core.management.base import BaseCommand

from participants.store import ParticipantStore


PARTICIPANT_SEED = [
    {
        "email": "jane.doe@example.com",
        "full_name": "Jane Doe",
        "contact_number": "+63 917 555 0101",
        "address": "Makati City, Metro Manila",
        "company": "Green Harvest Foods",
        "designation": "Procurement Lead",
        "first_time": "yes",
        "selected_events": ["event1", "event2"],
    },
    {
        "email": "marco.santos@example.com",
        "full_name": "Marco Santos",
        "contact_number": "+63 918 555 0144",
        "address": "Cebu City, Cebu",
        "company": "Island Feeds Inc.",
        "designation": "Operations Manager",
        "first_time": "no",
        "selected_events": ["event1"],
    },
    {
        "email": "liza.reyes@example.com",
        "full_name": "Liza Reyes",
        "contact_number": "+63 919 555 0199",
        "address": "Davao City, Davao del Sur",
        "company": "AgriPack Solutions",
        "designation": "Sales Director",
        "first_time": "yes",
        "selected_events": ["event2", "supplier-lunch"],
    },
    {
        "email": "paolo.cruz@example.com",
        "full_name": "Paolo Cruz",
        "contact_number": "+63 920 555 0123",
        "address": "Quezon City, Metro Manila",
        "company": "ColdChain Logistics",
        "designation": "Account Executive",
        "first_time": "no",
        "selected_events": [],
    },
]


class Command(BaseCommand):
    help = "Seed the registrations collection with demo participants"

    def handle(self, *args, **options):
        collection = ParticipantStore.from_settings().collection
        created = 0
        for seed in PARTICIPANT_SEED:
            if collection.find_one({"email": seed["email"]}):
                continue
            doc = dict(seed, full_name_upper=seed["full_name"].upper())
            collection.insert_one(doc)
            created += 1
        self.stdout.write(self.style.SUCCESS(f"Seeded {created} participant records."))
