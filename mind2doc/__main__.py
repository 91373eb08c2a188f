from mind2doc.main import main

main()
