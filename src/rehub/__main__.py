from rehub import main

main()
