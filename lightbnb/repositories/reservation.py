"""
Reservation repository for guest reservation listings and bookings.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, asc
from sqlalchemy.sql import Select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.reservation import Reservation
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from typing import List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):
    """Repository for reservations."""
    
    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)
    
    @staticmethod
    def build_guest_statement(guest_id: int, limit: int) -> Select:
        """
        Build the guest reservation listing statement.
        
        Reservations are joined to their property and to the property's reviews;
        properties without reviews drop out of the inner join.
        """
        return (
            select(
                Reservation.id,
                Reservation.property_id,
                Property.title,
                Property.cost_per_night,
                Reservation.start_date,
                Reservation.end_date,
                func.avg(PropertyReview.rating).label("average_rating"),
            )
            .join(Property, Property.id == Reservation.property_id)
            .join(PropertyReview, PropertyReview.property_id == Property.id)
            .where(Reservation.guest_id == guest_id)
            .group_by(Property.id, Reservation.id)
            .order_by(asc(Reservation.start_date), asc(Reservation.id))
            .limit(limit)
        )
    
    async def get_reservations_for_guest(self, guest_id: int, limit: int) -> List[Dict[str, Any]]:
        """
        Get a guest's reservations ordered by start date.
        
        Args:
            guest_id: ID of the guest
            limit: Maximum number of rows to return
            
        Returns:
            List of row mappings with reservation, property and average rating columns
        """
        try:
            result = await self.db.execute(self.build_guest_statement(guest_id, limit))
            rows = [dict(row) for row in result.mappings().all()]
            
            logger.debug(f"Retrieved {len(rows)} reservations for guest {guest_id}")
            return rows
        except Exception as e:
            logger.error(f"Failed to get reservations for guest {guest_id}: {e}")
            raise
    
    async def add_reservation(self, reservation_data: Dict[str, Any]) -> Reservation:
        """Insert a reservation and return the persisted row."""
        reservation = await self.create(reservation_data)
        logger.info(
            f"Created reservation {reservation.id} for guest {reservation.guest_id} "
            f"at property {reservation.property_id}"
        )
        return reservation
