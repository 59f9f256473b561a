"""
Unit tests for app.utils.list_helper
"""
import itertools

from app.domain.models.blog import Blog
from app.utils.list_helper import favorite_blog, total_likes


def _blog(title: str, likes: int) -> Blog:
    return Blog(id=None, title=title, url=f"https://example.com/{title}", likes=likes)


BLOGS = [
    _blog("React patterns", 7),
    _blog("Go To Statement Considered Harmful", 5),
    _blog("Canonical string reduction", 12),
    _blog("First class tests", 10),
    _blog("TDD harms architecture", 0),
    _blog("Type wars", 2),
]


class TestTotalLikes:
    """Tests for total_likes"""

    def test_empty_list_is_zero(self):
        assert total_likes([]) == 0

    def test_single_blog_equals_its_likes(self):
        assert total_likes([_blog("only", 5)]) == 5

    def test_bigger_list(self):
        assert total_likes(BLOGS) == 36

    def test_order_does_not_matter(self):
        subset = BLOGS[:4]
        results = {total_likes(list(p)) for p in itertools.permutations(subset)}
        assert results == {34}

    def test_does_not_mutate_input(self):
        blogs = list(BLOGS)
        total_likes(blogs)
        assert blogs == BLOGS

    def test_accepts_plain_documents(self):
        docs = [{"title": "a", "likes": 3}, {"title": "b", "likes": 4}, {"title": "c"}]
        assert total_likes(docs) == 7


class TestFavoriteBlog:
    """Tests for favorite_blog"""

    def test_empty_list_returns_none(self):
        assert favorite_blog([]) is None

    def test_single_blog_is_favorite(self):
        blog = _blog("only", 5)
        assert favorite_blog([blog]) is blog

    def test_returns_blog_with_most_likes(self):
        assert favorite_blog(BLOGS) is BLOGS[2]

    def test_ties_return_first_occurrence(self):
        blogs = [_blog("a", 3), _blog("b", 9), _blog("c", 9)]
        assert favorite_blog(blogs) is blogs[1]

    def test_all_equal_likes_returns_first(self):
        blogs = [_blog("a", 4), _blog("b", 4), _blog("c", 4)]
        assert favorite_blog(blogs) is blogs[0]

    def test_all_zero_likes_returns_first(self):
        blogs = [_blog("a", 0), _blog("b", 0)]
        assert favorite_blog(blogs) is blogs[0]

    def test_zero_first_then_positive(self):
        blogs = [_blog("a", 0), _blog("b", 1)]
        assert favorite_blog(blogs) is blogs[1]

    def test_accepts_plain_documents(self):
        docs = [{"title": "a", "likes": 1}, {"title": "b", "likes": 8}]
        assert favorite_blog(docs) == {"title": "b", "likes": 8}
