# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.blog_repository import BlogRepository
from ...domain.models.blog import Blog
from ...domain.constants import BlogFields
from ...domain.exceptions import CorruptRecordError, StorageUnavailableError, ValidationError
from .mongo_connection import get_blog_collection

logger = logging.getLogger(__name__)


def _to_object_id(blog_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(blog_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoBlogRepository(BlogRepository):
    """MongoDB implementation of BlogRepository"""
    
    def __init__(self, blog_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.blog_collection = blog_collection if blog_collection is not None else get_blog_collection()
    
    async def find_all(self) -> List[Blog]:
        """Return every stored blog"""
        try:
            documents = await self.blog_collection.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error listing blogs: {e}")
            raise StorageUnavailableError(f"Error listing blogs: {str(e)}") from e
        blogs = []
        for document in documents:
            try:
                blogs.append(self._document_to_blog(document))
            except CorruptRecordError as e:
                logger.warning(f"Skipping blog document: {e}")
        return blogs
    
    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        """
        Find blog by ID
        
        Args:
            blog_id: Blog ID to search for
            
        Returns:
            Blog domain model if found, None otherwise (also for malformed IDs)
        """
        object_id = _to_object_id(blog_id) if blog_id else None
        if object_id is None:
            return None
        
        try:
            document = await self.blog_collection.find_one({BlogFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding blog {blog_id}: {e}")
            raise StorageUnavailableError(f"Error finding blog by ID: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_blog(document)
    
    async def insert(self, blog: Blog) -> Blog:
        """
        Insert a new blog
        
        Args:
            blog: Validated Blog domain model (its id is ignored)
            
        Returns:
            Stored Blog domain model with ID set
        """
        blog_dict = self._blog_to_dict(blog)
        try:
            result = await self.blog_collection.insert_one(blog_dict)
        except PyMongoError as e:
            logger.error(f"Error inserting blog: {e}")
            raise StorageUnavailableError(f"Error saving blog: {str(e)}") from e
        blog_dict[BlogFields.MONGO_ID] = result.inserted_id
        return self._document_to_blog(blog_dict)
    
    async def update(self, blog: Blog) -> Optional[Blog]:
        """
        Replace title, author, url and likes of an existing blog
        
        Args:
            blog: Validated Blog domain model with id set
            
        Returns:
            Updated Blog, or None if no blog has that ID
        """
        object_id = _to_object_id(blog.id) if blog.id else None
        if object_id is None:
            return None
        
        try:
            document = await self.blog_collection.find_one_and_update(
                {BlogFields.MONGO_ID: object_id},
                {"$set": self._blog_to_dict(blog)},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Error updating blog {blog.id}: {e}")
            raise StorageUnavailableError(f"Error updating blog: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_blog(document)
    
    async def delete_by_id(self, blog_id: str) -> bool:
        """Delete blog by ID, True if a record was removed"""
        object_id = _to_object_id(blog_id) if blog_id else None
        if object_id is None:
            return False
        
        try:
            result = await self.blog_collection.delete_one({BlogFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error deleting blog {blog_id}: {e}")
            raise StorageUnavailableError(f"Error deleting blog: {str(e)}") from e
        return result.deleted_count > 0
    
    async def count(self) -> int:
        """Number of stored blogs"""
        try:
            return await self.blog_collection.count_documents({})
        except PyMongoError as e:
            raise StorageUnavailableError(f"Error counting blogs: {str(e)}") from e
    
    def _document_to_blog(self, document: Dict[str, Any]) -> Blog:
        """
        Convert MongoDB document to Blog domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Blog domain model
            
        Raises:
            CorruptRecordError: If the stored fields break the Blog rules
        """
        if not document or BlogFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        try:
            return Blog(
                id=str(document[BlogFields.MONGO_ID]),
                title=document.get(BlogFields.TITLE, ""),
                url=document.get(BlogFields.URL, ""),
                author=document.get(BlogFields.AUTHOR),
                likes=document.get(BlogFields.LIKES, 0),
            )
        except ValidationError as e:
            raise CorruptRecordError(
                f"Stored blog {document[BlogFields.MONGO_ID]} is invalid: {e.message}"
            ) from e
    
    def _blog_to_dict(self, blog: Blog) -> Dict[str, Any]:
        """Convert Blog domain model to MongoDB document (without _id)"""
        return {
            BlogFields.TITLE: blog.title,
            BlogFields.AUTHOR: blog.author,
            BlogFields.URL: blog.url,
            BlogFields.LIKES: blog.likes,
        }
