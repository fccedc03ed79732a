"""
Two terminals scanning the same single-use ticket at the same moment.

The prior-admission count is slowed down so, without serialization, both
scans would read zero admissions before either writes.
"""

import threading
import time

from fwe_access.models.enums import Outcome
from fwe_access.repositories.ticket_repo import TicketRepository
from fwe_access.services.checkin_service import CheckInService
from fwe_access.utils.locks import TicketLockTable

from conftest import NOW, SINGLE_USE_CATEGORY_ID, TERMINAL_PIN, Seeder


class SlowCountRepository(TicketRepository):
    def count_prior_access(self, conn, ticket_id):
        count = super().count_prior_access(conn, ticket_id)
        time.sleep(0.2)
        return count


def test_simultaneous_first_scans_admit_once(file_db):
    seeder = Seeder(file_db)
    seeder.venue()
    seeder.ticket("0100", category_id=SINGLE_USE_CATEGORY_ID)

    service = CheckInService(
        file_db, TicketLockTable(shards=4, timeout=10),
        tickets=SlowCountRepository(), clock=lambda: NOW,
    )
    barrier = threading.Barrier(2)
    outcomes = []
    errors = []

    def scan(code):
        barrier.wait()
        try:
            outcomes.append(service.register(TERMINAL_PIN, code).decision.outcome)
        except Exception as e:  # surfaced through the assertion below
            errors.append(e)

    threads = [threading.Thread(target=scan, args=(c,)) for c in ("100", "0100")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert sorted(o.value for o in outcomes) == ["ALREADY_USED", "GRANTED"]
    assert sorted(r["access_action_id"] for r in seeder.access_rows()) == [1, 4]


def test_different_tickets_do_not_block_each_other(file_db):
    seeder = Seeder(file_db)
    seeder.venue()
    seeder.ticket("1", category_id=SINGLE_USE_CATEGORY_ID)
    seeder.ticket("2", category_id=SINGLE_USE_CATEGORY_ID)

    service = CheckInService(file_db, TicketLockTable(shards=64, timeout=10), clock=lambda: NOW)
    results = {}

    def scan(code):
        results[code] = service.register(TERMINAL_PIN, code).decision.outcome

    threads = [threading.Thread(target=scan, args=(c,)) for c in ("1", "2")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == {"1": Outcome.GRANTED, "2": Outcome.GRANTED}
