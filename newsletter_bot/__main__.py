from newsletter_bot.cli import main

main()
