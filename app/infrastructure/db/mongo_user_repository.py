# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import (
    CorruptRecordError,
    StorageUnavailableError,
    UniquenessError,
    ValidationError,
)
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_all(self) -> List[User]:
        """Return every stored user"""
        try:
            documents = await self.user_collection.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error listing users: {e}")
            raise StorageUnavailableError(f"Error listing users: {str(e)}") from e
        users = []
        for document in documents:
            try:
                users.append(self._document_to_user(document))
            except CorruptRecordError as e:
                logger.warning(f"Skipping user document: {e}")
        return users
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None
        
        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None
        
        return await self._find_one({UserFields.MONGO_ID: object_id})
    
    async def insert(self, user: User) -> User:
        """
        Insert a new user, relying on the unique username index
        
        Args:
            user: Validated User domain model (its id is ignored)
            
        Returns:
            Stored User domain model with ID set
            
        Raises:
            UniquenessError: If the username is already taken
        """
        user_dict = self._user_to_dict(user)
        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            raise UniquenessError(UserFields.USERNAME) from e
        except PyMongoError as e:
            logger.error(f"Error inserting user: {e}")
            raise StorageUnavailableError(f"Error saving user: {str(e)}") from e
        user_dict[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(user_dict)
    
    async def count(self) -> int:
        """Number of stored users"""
        try:
            return await self.user_collection.count_documents({})
        except PyMongoError as e:
            raise StorageUnavailableError(f"Error counting users: {str(e)}") from e
    
    async def ensure_indexes(self) -> None:
        """Create the unique index on username (idempotent)"""
        try:
            await self.user_collection.create_index(UserFields.USERNAME, unique=True)
        except PyMongoError as e:
            raise StorageUnavailableError(f"Error creating user indexes: {str(e)}") from e
    
    async def _find_one(self, query: Dict[str, Any]) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except PyMongoError as e:
            logger.error(f"Error finding user: {e}")
            raise StorageUnavailableError(f"Error finding user: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)
    
    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
            
        Raises:
            CorruptRecordError: If the stored fields break the User rules
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        try:
            return User(
                id=str(document[UserFields.MONGO_ID]),
                username=document.get(UserFields.USERNAME, ""),
                password_hash=document.get(UserFields.PASSWORD_HASH, ""),
                name=document.get(UserFields.NAME),
            )
        except ValidationError as e:
            raise CorruptRecordError(
                f"Stored user {document[UserFields.MONGO_ID]} is invalid: {e.message}"
            ) from e
    
    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """Convert User domain model to MongoDB document (without _id)"""
        return {
            UserFields.USERNAME: user.username,
            UserFields.NAME: user.name,
            UserFields.PASSWORD_HASH: user.password_hash,
        }
