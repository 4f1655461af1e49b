from gitops_demo.run import main

main()
