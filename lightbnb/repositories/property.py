"""
Property repository for listing search and property creation.
Search statements are assembled from an ordered list of SQLAlchemy predicates,
so every filter value travels as a bound parameter.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, func, asc
from sqlalchemy.sql import Select
from lightbnb.config import settings
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import PropertySearchFilters
from typing import Optional, List, Dict, Any, Tuple
import logging

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for property listings with filtered, rating-aware search.
    """
    
    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)
    
    async def add_property(self, property_data: Dict[str, Any]) -> Property:
        """
        Insert a property and return the persisted row.
        
        Args:
            property_data: Dictionary of recognized property fields
            
        Returns:
            Created property instance including its generated id
        """
        property_obj = await self.create(property_data)
        logger.info(f"Created property: {property_obj.title} (ID: {property_obj.id})")
        return property_obj
    
    @classmethod
    def build_search_statement(
        cls,
        filters: Optional[PropertySearchFilters] = None,
        limit: Optional[int] = None
    ) -> Select:
        """
        Build the property search statement.
        
        The statement always joins reviews, groups by property and orders by
        nightly cost. WHERE predicates are added for city, owner and price range;
        the minimum rating becomes a HAVING predicate on the average rating.
        
        Args:
            filters: Search filters, all optional
            limit: Maximum number of rows to return
            
        Returns:
            SQLAlchemy select yielding (Property, average_rating) rows
        """
        filters = filters or PropertySearchFilters()
        limit = settings.default_query_limit if limit is None else limit
        
        average_rating = func.avg(PropertyReview.rating)
        query = select(Property, average_rating.label("average_rating"))
        
        if filters.include_unrated:
            query = query.outerjoin(PropertyReview, PropertyReview.property_id == Property.id)
        else:
            query = query.join(PropertyReview, PropertyReview.property_id == Property.id)
        
        conditions = cls._build_filter_conditions(filters)
        if conditions:
            query = query.where(and_(*conditions))
        
        query = query.group_by(Property.id)
        
        having = cls._build_having_conditions(filters, average_rating)
        if having:
            query = query.having(and_(*having))
        
        return query.order_by(asc(Property.cost_per_night), asc(Property.id)).limit(limit)
    
    @staticmethod
    def _build_filter_conditions(filters: PropertySearchFilters) -> List:
        """
        Build row-level conditions from search filters, in clause order.
        
        Args:
            filters: PropertySearchFilters instance
            
        Returns:
            List of SQLAlchemy conditions
        """
        conditions = []
        
        # City filter (case-insensitive partial match)
        if filters.city:
            conditions.append(Property.city.ilike(f"%{filters.city}%"))
        
        # Owner filter
        if filters.owner_id is not None:
            conditions.append(Property.owner_id == filters.owner_id)
        
        # Price range, open on whichever side was not supplied
        if filters.has_price_range:
            low = filters.minimum_price_per_night
            high = filters.maximum_price_per_night
            if low is None:
                low = 0
            if high is None:
                high = settings.max_price_sentinel
            conditions.append(Property.cost_per_night.between(low, high))
        
        return conditions
    
    @staticmethod
    def _build_having_conditions(filters: PropertySearchFilters, average_rating) -> List:
        """Build post-aggregation conditions from search filters."""
        conditions = []
        
        if filters.minimum_rating is not None:
            conditions.append(average_rating >= filters.minimum_rating)
        
        return conditions
    
    async def search_properties(
        self,
        filters: Optional[PropertySearchFilters] = None,
        limit: Optional[int] = None
    ) -> List[Tuple[Property, Any]]:
        """
        Search properties with optional filters.
        
        Args:
            filters: PropertySearchFilters instance with search criteria
            limit: Maximum number of records to return
            
        Returns:
            List of (property, average rating) pairs ordered by nightly cost
        """
        try:
            query = self.build_search_statement(filters, limit)
            result = await self.db.execute(query)
            rows = [(row[0], row[1]) for row in result.all()]
            
            logger.debug(f"Property search returned {len(rows)} results")
            return rows
        except Exception as e:
            logger.error(f"Failed to search properties: {e}")
            raise
