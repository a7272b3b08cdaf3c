RECIPE_GENERATION_PROMPT_VERSION = "v1"

RECIPE_GENERATION_TEMPLATE = """You are a professional chef. Create one creative recipe from these ingredients:
{ingredient_list}

Provide:
1. A creative, appetising dish name
2. The ingredients with amounts (use only the ingredients above; basic seasonings may be added)
3. Detailed cooking steps (5-8 steps)
4. Difficulty (easy, medium or hard)
5. Estimated cooking time in minutes
6. 2-3 cooking tips

Return JSON in exactly this shape:
{{
  "name": "dish name",
  "ingredients": [
    {{"name": "ingredient name", "amount": "amount"}}
  ],
  "steps": ["step 1", "step 2"],
  "difficulty": "easy/medium/hard",
  "time": 30,
  "tips": ["tip 1", "tip 2"]
}}

Do not add any other text. Make sure the JSON is valid.
"""
