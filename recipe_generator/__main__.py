from recipe_generator.cli import main

main()
