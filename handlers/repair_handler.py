"""
handlers/repair_handler.py
--------------------------
Room repair requests.
"""

from db.session import Session
from handlers.console import Console
from security.auth import manager_only
from services.repair_service import RepairService


@manager_only
def place_repair_command(session: Session, console: Console) -> None:
    hotel_id = console.ask_int("Please enter the hotelID for the repair request")
    room_number = console.ask_int("Please enter the room number for the repair request")
    company_id = console.ask_int("Please enter the maintenance companyID")
    repair_date = console.ask_date("Please enter the repair date (YYYY-MM-DD)")
    repair = RepairService(session.executor).place_request(hotel_id, room_number, company_id, repair_date)
    console.say(f"Room repair request successfully sent! Repair ID = {repair.id}")


@manager_only
def repair_history_command(session: Session, console: Console) -> None:
    hotel_id = console.ask_int("Please enter the hotelID")
    console.show_table(RepairService(session.executor).repair_history(hotel_id))
