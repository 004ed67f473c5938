"""Describes the meal prep domain. Centres around the `CookingTask`.

Why is this hard?

- A kitchen only has so many appliances and most of them hold one thing at a
  time.
- Some work (chopping on the counter, chilling in the fridge) happily runs
  alongside other work on the same appliance.
- A session has a fixed length and the tasks do not always fit.

Everything else, storing sessions, recipes, the UI, lives outside and hands
tasks in and takes scheduled tasks out.
"""
