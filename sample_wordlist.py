"""
---
version: 0.1.0
created: 2026-10-18
updated: 2026-10-18
---

sample_wordlist.py — Bundled word list and sample puzzle.

SAMPLE_WORDLIST uses the same "word rank count" line format as a full corpus
export (rank by descending usage count), trimmed to common English words. The
last two entries sit below ALLOWED_WORD_MINPOPULARITY and are filtered out at
build time.

SAMPLE_PUZZLE is a published cryptogram; SAMPLE_KEY is the key it was
enciphered with, in 26-letter notation.
"""

SAMPLE_PUZZLE: str = (
    "WQELQXNKW FE AFELUXW, LUIUXXUM FE K IWELQXW, LUNKW FE ZUN'E ZFCL, "
    "LAKL'E MAW MQ BKOO FL LAQ VXQEQDL."
)

SAMPLE_PLAINTEXT: str = (
    "YESTERDAY IS HISTORY, TOMORROW IS A MYSTERY, TODAY IS GOD'S GIFT, "
    "THAT'S WHY WE CALL IT THE PRESENT."
)

SAMPLE_KEY: str = "KJBNQCZAFYSOIDUVRXELHPMGWT"

SAMPLE_WORDLIST: str = """\
the 1 53097401461
of 2 49380583358
and 3 45923942522
to 4 42709266545
a 5 39719617886
in 6 36939244633
is 7 34353497508
that 8 31948752682
for 9 29712339994
it 10 27632476194
as 11 25698202860
was 12 23899328659
with 13 22226375652
he 14 20670529356
be 15 19223592301
by 16 17877940839
on 17 16626484980
not 18 15462631031
i 19 14380246858
his 20 13373629577
this 21 12437475506
are 22 11566852220
or 23 10757172564
from 24 10004170484
at 25 9303878550
which 26 8652607051
but 27 8046924557
have 28 7483639838
an 29 6959785049
they 30 6472600095
you 31 6019518088
were 32 5598151821
her 33 5206281193
she 34 4841841509
there 35 4502912603
been 36 4187708720
one 37 3894569109
all 38 3621949271
we 39 3368412822
their 40 3132623924
has 41 2913340249
would 42 2709406431
when 43 2519747980
if 44 2343365621
so 45 2179330027
no 46 2026776925
will 47 1884902540
more 48 1752959362
can 49 1630252206
who 50 1516134551
out 51 1410005132
said 52 1311304772
do 53 1219513437
what 54 1134147496
up 55 1054757171
its 56 980924169
about 57 912259477
into 58 848401313
them 59 789013221
than 60 733782295
some 61 682417534
could 62 634648306
time 63 590222924
only 64 548907319
my 65 510483806
other 66 474749939
then 67 441517443
also 68 410611221
new 69 381868435
like 70 355137644
these 71 330278008
two 72 307158547
may 73 285657448
first 74 265661426
any 75 247065126
our 76 229770567
now 77 213686627
such 78 198728563
way 79 184817563
me 80 171880333
even 81 159848709
most 82 148659299
made 83 138253148
after 84 128575427
many 85 119575147
over 86 111204886
did 87 103420543
just 88 96181104
where 89 89448426
well 90 83187036
through 91 77363943
years 92 71948466
back 93 66912073
must 94 62228227
much 95 57872251
before 96 53821193
your 97 50053709
go 98 46549949
good 99 43291452
how 100 40261050
us 101 37442776
people 102 34821781
see 103 32384256
three 104 30117358
great 105 28009142
know 106 26048502
still 107 24225106
same 108 22529348
own 109 20952293
here 110 19485632
day 111 18121637
last 112 16853122
those 113 15673403
both 114 14576264
few 115 13555925
world 116 12607010
might 117 11724519
down 118 10903802
while 119 10140535
life 120 9430697
work 121 8770548
part 122 8156609
being 123 7585646
under 124 7054650
never 125 6560824
again 126 6101566
old 127 5674456
each 128 5277244
place 129 4907836
upon 130 4564287
year 131 4244786
right 132 3947650
house 133 3671314
god 134 3414322
s 135 3175319
call 136 2953046
today 137 2746332
gift 138 2554088
why 139 2375301
present 140 2209029
history 141 2054396
mystery 142 1910588
yesterday 143 1776846
tomorrow 144 1652466
zyzzyva 145 420
qoph 146 99999
"""
