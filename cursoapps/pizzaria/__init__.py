"""Pizzas, reviews, their JSON file store and web API."""