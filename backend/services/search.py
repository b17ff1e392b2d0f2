# backend/services/search.py
"""
레시피 검색 서비스
"""
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List

from features.recipe.schemas import Recipe, SearchResult
from utils.logger import get_logger

logger = get_logger("recipe_search", tag="Search")

DEFAULT_PREP_TIME = 15
DEFAULT_COOK_TIME = 30
DEFAULT_SERVINGS = 4
DEFAULT_DIFFICULTY = "Medium"


class RecipeSearchService(ABC):
    """레시피 검색 추상 클래스"""

    @abstractmethod
    async def search(self, query: str) -> List[SearchResult]:
        """검색 실행 (결과 없음은 빈 리스트)"""
        pass

    def to_recipe(self, result: SearchResult) -> Recipe:
        """검색 결과 → Recipe 변환"""
        return Recipe(
            title=result.title,
            description=result.description,
            image_url=result.image_url,
            video_url=result.video_url,
            source=result.source,
            ingredients=list(result.ingredients),
            instructions=list(result.instructions),
            prep_time=DEFAULT_PREP_TIME,
            cook_time=DEFAULT_COOK_TIME,
            servings=DEFAULT_SERVINGS,
            difficulty=DEFAULT_DIFFICULTY,
            created_at=datetime.now(timezone.utc),
        )


CARBONARA = SearchResult(
    title="Classic Spaghetti Carbonara",
    description="Creamy Italian pasta with eggs, cheese, and pancetta.",
    image_url="https://via.placeholder.com/300x200?text=Carbonara",
    source="Italian Recipes",
    ingredients=[
        "400g spaghetti", "200g pancetta or bacon", "4 large eggs",
        "100g Parmesan cheese", "2 cloves garlic", "Black pepper", "Salt",
    ],
    instructions=[
        "Boil salted water and cook spaghetti until al dente",
        "Fry pancetta in a large pan until crispy",
        "Beat eggs with grated Parmesan and black pepper",
        "Drain pasta, reserving some pasta water",
        "Add hot pasta to pancetta pan",
        "Remove from heat and quickly mix in egg mixture",
        "Add pasta water if needed for creaminess",
        "Serve immediately with extra Parmesan",
    ],
)

CHICKEN_CURRY = SearchResult(
    title="Chicken Curry",
    description="Aromatic and flavorful chicken curry with spices.",
    image_url="https://via.placeholder.com/300x200?text=Chicken+Curry",
    source="Indian Cuisine",
    ingredients=[
        "1 kg chicken pieces", "2 onions chopped", "4 tomatoes chopped",
        "1 tbsp ginger-garlic paste", "2 tsp curry powder", "1 tsp turmeric",
        "1 can coconut milk", "Salt to taste", "2 tbsp oil",
    ],
    instructions=[
        "Heat oil in a large pot over medium heat",
        "Add onions and cook until golden brown",
        "Add ginger-garlic paste and cook for 1 minute",
        "Add tomatoes and cook until soft",
        "Add curry powder and turmeric, cook for 30 seconds",
        "Add chicken pieces and brown on all sides",
        "Pour in coconut milk and bring to a simmer",
        "Cover and cook for 25 minutes until chicken is tender",
        "Season with salt and serve with rice",
    ],
)

CHOCOLATE_CAKE = SearchResult(
    title="Rich Chocolate Cake",
    description="Moist and decadent chocolate cake perfect for celebrations.",
    image_url="https://via.placeholder.com/300x200?text=Chocolate+Cake",
    source="Baking Masters",
    ingredients=[
        "2 cups all-purpose flour", "2 cups sugar", "3/4 cup cocoa powder",
        "2 tsp baking soda", "1 tsp baking powder", "1 tsp salt", "2 eggs",
        "1 cup buttermilk", "1 cup hot coffee", "1/2 cup vegetable oil",
    ],
    instructions=[
        "Preheat oven to 350°F and grease two 9-inch pans",
        "Mix all dry ingredients in a large bowl",
        "In another bowl, whisk eggs, buttermilk, and oil",
        "Combine wet and dry ingredients",
        "Slowly add hot coffee and mix until smooth",
        "Divide batter between prepared pans",
        "Bake for 30-35 minutes until toothpick comes out clean",
        "Cool completely before frosting",
    ],
)

# (키워드들, 결과) - 위에서부터 첫 매칭
MOCK_CATALOG = [
    (("pasta", "spaghetti"), CARBONARA),
    (("chicken", "curry"), CHICKEN_CURRY),
    (("chocolate", "cake"), CHOCOLATE_CAKE),
]


def generic_result(query: str) -> SearchResult:
    return SearchResult(
        title=f"Classic {query}",
        description=f"A delicious and easy {query} recipe perfect for any occasion.",
        image_url="https://via.placeholder.com/300x200?text=Recipe+Image",
        source="Recipe Collection",
        ingredients=["Main ingredient", "Seasonings", "Cooking oil", "Fresh herbs", "Salt and pepper"],
        instructions=[
            "Prepare all ingredients",
            "Heat cooking oil in a pan",
            "Add main ingredient and seasonings",
            "Cook according to recipe requirements",
            "Garnish with fresh herbs and serve",
        ],
    )


class MockRecipeSearch(RecipeSearchService):
    """키워드 → 고정 레시피 매핑 (실제 검색 API 대용)"""

    async def search(self, query: str) -> List[SearchResult]:
        lower_query = query.lower()
        logger.debug(f"검색 쿼리: {query}")

        for keywords, result in MOCK_CATALOG:
            if any(k in lower_query for k in keywords):
                return [result.model_copy(deep=True)]

        return [generic_result(query)]


# 검색 엔진 팩토리
def get_search_service(engine: str = "mock") -> RecipeSearchService:
    """검색 엔진 선택"""
    engines = {
        "mock": MockRecipeSearch,
    }

    engine_class = engines.get(engine.lower())
    if not engine_class:
        logger.warning(f"지원하지 않는 검색 엔진: {engine}")
        return MockRecipeSearch()  # 기본값

    return engine_class()
