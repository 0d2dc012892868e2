from js_call_builder.cli import main

main()
