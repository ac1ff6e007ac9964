import sys

from rapidcurvepy.app import main

sys.exit(main())
