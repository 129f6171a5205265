"""Single-page to-do list: task store, local persistence and a console front end."""
